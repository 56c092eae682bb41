"""
step.py — Algorithm Step
========================
Every algorithm is a generator that yields Step objects.
A Step is one unit of progress: it names at most one node and one edge
to recolour, and carries the text the UI shows for it.

    • kind       – what happened (see StepKind)
    • node_id    – the node the step is about, if any
    • edge_id    – the edge the step is about, if any
    • message    – short status line ("Considering edge 1–2 (w=3)")
    • path_note  – longer narrative appended to the path log
    • total_cost – running MST cost, only on the terminal `done` step
    • incomplete – True on a `done` step whose MST could not span the graph

Design decisions:
  - Step is a frozen dataclass.  The generator is the only writer; the
    reducer and the stepper are pure readers.
  - Steps do NOT carry colours.  The reducer derives node / edge status
    from the kind, so the precedence rules live in one place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StepKind(Enum):
    VISIT_NODE     = "visitNode"      # node reached for the first time
    PROCESS_NODE   = "processNode"    # node being expanded / new best candidate
    COMPLETE_NODE  = "completeNode"   # node finished
    VISIT_EDGE     = "visitEdge"      # edge being considered
    CURRENT_EDGE   = "currentEdge"    # edge being walked (DFS)
    SKIP_EDGE      = "skipEdge"       # edge rejected
    TRAVERSE_EDGE  = "traverseEdge"   # edge taken to a new node (BFS / DFS)
    ADD_TO_MST     = "addToMST"       # edge + node accepted into the spanning tree
    INFO           = "info"           # narration only, nothing to recolour
    DONE           = "done"           # terminal step


@dataclass(frozen=True)
class Step:
    kind:        StepKind
    message:     str             = ""
    node_id:     Optional[str]   = None
    edge_id:     Optional[str]   = None
    path_note:   Optional[str]   = None
    total_cost:  Optional[float] = None
    incomplete:  bool            = False

    @property
    def is_final(self) -> bool:
        return self.kind is StepKind.DONE

    def to_dict(self) -> dict:
        return {
            "kind":       self.kind.value,
            "nodeId":     self.node_id,
            "edgeId":     self.edge_id,
            "message":    self.message,
            "pathNote":   self.path_note,
            "totalCost":  self.total_cost,
            "incomplete": self.incomplete,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Step":
        return cls(
            kind=StepKind(data["kind"]),
            message=data.get("message", ""),
            node_id=data.get("nodeId"),
            edge_id=data.get("edgeId"),
            path_note=data.get("pathNote"),
            total_cost=data.get("totalCost"),
            incomplete=bool(data.get("incomplete", False)),
        )


def no_start_step(algo_label: str) -> Step:
    """The single terminal step an algorithm yields when it has no valid start node."""
    return Step(StepKind.DONE, message=f"{algo_label}: no start node selected")


def format_cost(value: float) -> str:
    """Render 7.0 as '7' and 2.5 as '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_edge(graph, edge) -> str:
    """'1–2 (w=3)' using node labels."""
    return f"{graph.label_of(edge.source)}–{graph.label_of(edge.target)} (w={format_cost(edge.weight)})"
