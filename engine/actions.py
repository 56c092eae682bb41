"""
actions.py — Reducer Actions
=============================
One frozen dataclass per thing that can happen to the application state.
The reducer dispatches on the action's class.

`action_from_dict` decodes the JSON form used by the HTTP layer:

    {"type": "add_edge", "source": "a1", "target": "a2", "weight": 3}

`type` is the snake_case name from ACTION_TYPES; the remaining keys are
the dataclass fields.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional, Type

from graph import Graph, GraphFormatError
from algorithms.step import Step


class ActionError(ValueError):
    """Raised when an action payload cannot be decoded."""


class Action:
    """Marker base class for every reducer action."""


# ---------------------------------------------------------------------------
# Structural edits (recorded in history)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AddNode(Action):
    x: float
    y: float
    label: Optional[str] = None
    node_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteNode(Action):
    node_id: str


@dataclass(frozen=True)
class AddEdge(Action):
    source: str
    target: str
    weight: Optional[float] = None
    edge_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteEdge(Action):
    edge_id: str


@dataclass(frozen=True)
class UpdateEdgeWeight(Action):
    edge_id: str
    weight: float


@dataclass(frozen=True)
class ClearGraph(Action):
    pass


@dataclass(frozen=True)
class LoadGraph(Action):
    graph: Graph


# ---------------------------------------------------------------------------
# Editor state
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SelectNode(Action):
    node_id: Optional[str] = None


@dataclass(frozen=True)
class SelectEdge(Action):
    edge_id: Optional[str] = None


@dataclass(frozen=True)
class MoveNode(Action):
    node_id: str
    x: float
    y: float


@dataclass(frozen=True)
class Undo(Action):
    pass


@dataclass(frozen=True)
class Redo(Action):
    pass


# ---------------------------------------------------------------------------
# Algorithm lifecycle
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SetAlgorithm(Action):
    algorithm: Optional[str] = None


@dataclass(frozen=True)
class SetRunning(Action):
    is_running: bool


@dataclass(frozen=True)
class SetSpeed(Action):
    speed: int


@dataclass(frozen=True)
class ApplyStep(Action):
    step: Optional[Step] = None


@dataclass(frozen=True)
class ResetStatus(Action):
    pass


@dataclass(frozen=True)
class SetStartNode(Action):
    node_id: Optional[str] = None


@dataclass(frozen=True)
class AppendPathNote(Action):
    text: str


@dataclass(frozen=True)
class ClearPath(Action):
    pass


@dataclass(frozen=True)
class SetTotalCost(Action):
    cost: Optional[float] = None


ACTION_TYPES: Dict[str, Type[Action]] = {
    "add_node":           AddNode,
    "delete_node":        DeleteNode,
    "select_node":        SelectNode,
    "move_node":          MoveNode,
    "add_edge":           AddEdge,
    "delete_edge":        DeleteEdge,
    "select_edge":        SelectEdge,
    "update_edge_weight": UpdateEdgeWeight,
    "set_algorithm":      SetAlgorithm,
    "set_running":        SetRunning,
    "set_speed":          SetSpeed,
    "apply_step":         ApplyStep,
    "reset_status":       ResetStatus,
    "clear_graph":        ClearGraph,
    "set_start_node":     SetStartNode,
    "append_path_note":   AppendPathNote,
    "clear_path":         ClearPath,
    "set_total_cost":     SetTotalCost,
    "undo":               Undo,
    "redo":               Redo,
    "load_graph":         LoadGraph,
}


def action_from_dict(data: dict) -> Action:
    if not isinstance(data, dict):
        raise ActionError("action must be a JSON object")

    kind = data.get("type")
    cls = ACTION_TYPES.get(kind)
    if cls is None:
        raise ActionError(f"Unknown action type: {kind!r}")

    allowed = {f.name for f in fields(cls)}
    kwargs = {k: v for k, v in data.items() if k != "type"}
    unknown = set(kwargs) - allowed
    if unknown:
        raise ActionError(f"{kind}: unexpected field(s) {', '.join(sorted(unknown))}")

    try:
        if cls is LoadGraph and "graph" in kwargs:
            kwargs["graph"] = Graph.from_dict(kwargs["graph"])
        if cls is ApplyStep and kwargs.get("step") is not None:
            kwargs["step"] = Step.from_dict(kwargs["step"])
        return cls(**kwargs)
    except GraphFormatError as e:
        raise ActionError(f"{kind}: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise ActionError(f"{kind}: {e}") from e
