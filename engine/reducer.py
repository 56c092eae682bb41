"""
reducer.py — Graph State Reducer
=================================
    new_state = reduce(state, action)

A pure function: it never mutates `state` or anything inside it.  Actions
that change the graph work on a copy, and structural edits (add / delete
node or edge, weight change, clear, load) also push that copy onto the
undo history.

Anything that would be a no-op (duplicate edge, unknown id, bad weight)
returns the very same state object, so callers can test `new is old`.

Status painting for ApplyStep, highest priority first:

    start  >  completed  >  current  >  visited  >  default

`current` is the node named by a processNode / addToMST step.  Only the
edge named by the step is recoloured; other edges keep their status.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, FrozenSet, Optional, Type

import config
from graph import Graph, NodeStatus, EdgeStatus, is_valid_weight
from algorithms import get_algorithm
from algorithms.step import Step, StepKind
from engine.actions import (
    Action,
    AddNode, DeleteNode, SelectNode, MoveNode,
    AddEdge, DeleteEdge, SelectEdge, UpdateEdgeWeight,
    SetAlgorithm, SetRunning, SetSpeed, ApplyStep, ResetStatus,
    ClearGraph, SetStartNode, AppendPathNote, ClearPath, SetTotalCost,
    Undo, Redo, LoadGraph,
)
from engine.history import History
from engine.state import AppState

logger = logging.getLogger(__name__)

_VISITING   = (StepKind.VISIT_NODE, StepKind.PROCESS_NODE)
_COMPLETING = (StepKind.COMPLETE_NODE, StepKind.ADD_TO_MST)
_FOCUSING   = (StepKind.PROCESS_NODE, StepKind.ADD_TO_MST)

_EDGE_PAINT = {
    StepKind.VISIT_EDGE:    EdgeStatus.CURRENT,
    StepKind.CURRENT_EDGE:  EdgeStatus.CURRENT,
    StepKind.ADD_TO_MST:    EdgeStatus.VISITED,
    StepKind.TRAVERSE_EDGE: EdgeStatus.VISITED,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _commit(state: AppState, graph: Graph, **changes) -> AppState:
    """New state with `graph` live and a snapshot of it pushed onto history."""
    return replace(state, graph=graph, history=state.history.push(graph), **changes)


def _paint_nodes(
    graph: Graph,
    start: Optional[str],
    visited: FrozenSet[str],
    completed: FrozenSet[str],
    focus: Optional[str],
) -> None:
    for node in graph.nodes.values():
        if node.id == start:
            node.status = NodeStatus.START
        elif node.id in completed:
            node.status = NodeStatus.COMPLETED
        elif node.id == focus:
            node.status = NodeStatus.CURRENT
        elif node.id in visited:
            node.status = NodeStatus.VISITED
        else:
            node.status = NodeStatus.DEFAULT


# ---------------------------------------------------------------------------
# Structural edits
# ---------------------------------------------------------------------------
def _add_node(state: AppState, action: AddNode) -> AppState:
    graph = state.graph.copy()
    if action.node_id is not None and action.node_id in graph.nodes:
        logger.debug("add_node: id %s already in use", action.node_id)
        return state
    label = action.label if action.label is not None else graph.next_label()
    node = graph.create_node(action.x, action.y, label=label, node_id=action.node_id)
    return _commit(state, graph, selected_node_id=node.id, selected_edge_id=None)


def _delete_node(state: AppState, action: DeleteNode) -> AppState:
    if action.node_id not in state.graph.nodes:
        logger.debug("delete_node: unknown node %s", action.node_id)
        return state
    graph = state.graph.copy()
    graph.remove_node(action.node_id)
    start = None if state.start_node_id == action.node_id else state.start_node_id
    return _commit(state, graph, selected_node_id=None, start_node_id=start)


def _add_edge(state: AppState, action: AddEdge) -> AppState:
    src, tgt = action.source, action.target
    if src == tgt or src not in state.graph.nodes or tgt not in state.graph.nodes:
        logger.debug("add_edge: rejected %s-%s (missing endpoint or self-loop)", src, tgt)
        return state
    if state.graph.has_edge_between(src, tgt):
        logger.debug("add_edge: %s-%s already connected", src, tgt)
        return state
    if action.edge_id is not None and action.edge_id in state.graph.edges:
        logger.debug("add_edge: id %s already in use", action.edge_id)
        return state

    weight = 1 if action.weight is None else action.weight
    if not is_valid_weight(weight):
        logger.warning("add_edge: rejected invalid weight %r for %s-%s", weight, src, tgt)
        return state

    graph = state.graph.copy()
    edge = graph.create_edge(src, tgt, weight=weight, edge_id=action.edge_id)
    return _commit(state, graph, selected_edge_id=edge.id, selected_node_id=None)


def _delete_edge(state: AppState, action: DeleteEdge) -> AppState:
    if action.edge_id not in state.graph.edges:
        logger.debug("delete_edge: unknown edge %s", action.edge_id)
        return state
    graph = state.graph.copy()
    graph.remove_edge(action.edge_id)
    return _commit(state, graph, selected_edge_id=None)


def _update_edge_weight(state: AppState, action: UpdateEdgeWeight) -> AppState:
    if action.edge_id not in state.graph.edges:
        logger.debug("update_edge_weight: unknown edge %s", action.edge_id)
        return state
    if not is_valid_weight(action.weight):
        logger.warning("update_edge_weight: rejected invalid weight %r for edge %s", action.weight, action.edge_id)
        return state
    graph = state.graph.copy()
    graph.edges[action.edge_id].weight = action.weight
    return _commit(state, graph)


def _clear_graph(state: AppState, action: ClearGraph) -> AppState:
    graph = Graph()
    return AppState(graph=graph, history=state.history.push(graph), speed=state.speed)


def _load_graph(state: AppState, action: LoadGraph) -> AppState:
    graph = action.graph.copy()
    return _commit(
        state,
        graph,
        selected_node_id=None,
        selected_edge_id=None,
        algorithm=None,
        is_running=False,
        current_step=None,
        start_node_id=None,
        total_cost=None,
        path=(),
        visited=frozenset(),
        completed=frozenset(),
    )


# ---------------------------------------------------------------------------
# Editor state
# ---------------------------------------------------------------------------
def _select_node(state: AppState, action: SelectNode) -> AppState:
    return replace(state, selected_node_id=action.node_id, selected_edge_id=None)


def _select_edge(state: AppState, action: SelectEdge) -> AppState:
    return replace(state, selected_edge_id=action.edge_id, selected_node_id=None)


def _move_node(state: AppState, action: MoveNode) -> AppState:
    if action.node_id not in state.graph.nodes:
        return state
    graph = state.graph.copy()
    node = graph.nodes[action.node_id]
    node.x, node.y = action.x, action.y
    return replace(state, graph=graph)


def _restore(state: AppState, moved: History, graph: Optional[Graph]) -> AppState:
    if graph is None:
        return state
    return replace(state, graph=graph, history=moved, selected_node_id=None, selected_edge_id=None)


def _undo(state: AppState, action: Undo) -> AppState:
    return _restore(state, *state.history.undo())


def _redo(state: AppState, action: Redo) -> AppState:
    return _restore(state, *state.history.redo())


# ---------------------------------------------------------------------------
# Algorithm lifecycle
# ---------------------------------------------------------------------------
def _set_algorithm(state: AppState, action: SetAlgorithm) -> AppState:
    if action.algorithm is not None and get_algorithm(action.algorithm) is None:
        logger.debug("set_algorithm: unknown algorithm %r", action.algorithm)
        return state
    return replace(
        state,
        algorithm=action.algorithm,
        total_cost=None,
        path=(),
        visited=frozenset(),
        completed=frozenset(),
    )


def _set_running(state: AppState, action: SetRunning) -> AppState:
    return replace(state, is_running=bool(action.is_running))


def _set_speed(state: AppState, action: SetSpeed) -> AppState:
    ms = action.speed
    if isinstance(ms, bool) or not isinstance(ms, int) or ms < config.MIN_SPEED_MS:
        logger.warning("set_speed: rejected interval %r", ms)
        return state
    return replace(state, speed=ms)


def _apply_step(state: AppState, action: ApplyStep) -> AppState:
    step: Optional[Step] = action.step
    graph = state.graph.copy()

    if step is None:
        graph.reset_status()
        return replace(state, graph=graph, current_step=None)

    visited, completed = state.visited, state.completed
    if step.node_id is not None:
        if step.kind in _VISITING:
            visited = visited | {step.node_id}
        elif step.kind in _COMPLETING:
            completed = completed | {step.node_id}

    focus = step.node_id if step.kind in _FOCUSING else None
    _paint_nodes(graph, state.start_node_id, visited, completed, focus)

    edge = graph.get_edge(step.edge_id)
    if edge is not None:
        edge.status = _EDGE_PAINT.get(step.kind, EdgeStatus.DEFAULT)

    return replace(state, graph=graph, current_step=step, visited=visited, completed=completed)


def _reset_status(state: AppState, action: ResetStatus) -> AppState:
    graph = state.graph.copy()
    graph.reset_status()
    return replace(
        state,
        graph=graph,
        current_step=None,
        total_cost=None,
        path=(),
        visited=frozenset(),
        completed=frozenset(),
    )


def _set_start_node(state: AppState, action: SetStartNode) -> AppState:
    graph = state.graph.copy()
    for node in graph.nodes.values():
        node.status = NodeStatus.START if node.id == action.node_id else NodeStatus.DEFAULT
    for edge in graph.edges.values():
        edge.reset()
    return replace(
        state,
        graph=graph,
        start_node_id=action.node_id,
        visited=frozenset(),
        completed=frozenset(),
    )


def _append_path_note(state: AppState, action: AppendPathNote) -> AppState:
    return replace(state, path=state.path + (action.text,))


def _clear_path(state: AppState, action: ClearPath) -> AppState:
    return replace(state, path=())


def _set_total_cost(state: AppState, action: SetTotalCost) -> AppState:
    return replace(state, total_cost=action.cost)


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------
HANDLERS: Dict[Type[Action], Callable[[AppState, Action], AppState]] = {
    AddNode:          _add_node,
    DeleteNode:       _delete_node,
    SelectNode:       _select_node,
    MoveNode:         _move_node,
    AddEdge:          _add_edge,
    DeleteEdge:       _delete_edge,
    SelectEdge:       _select_edge,
    UpdateEdgeWeight: _update_edge_weight,
    SetAlgorithm:     _set_algorithm,
    SetRunning:       _set_running,
    SetSpeed:         _set_speed,
    ApplyStep:        _apply_step,
    ResetStatus:      _reset_status,
    ClearGraph:       _clear_graph,
    SetStartNode:     _set_start_node,
    AppendPathNote:   _append_path_note,
    ClearPath:        _clear_path,
    SetTotalCost:     _set_total_cost,
    Undo:             _undo,
    Redo:             _redo,
    LoadGraph:        _load_graph,
}


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that follows `state` once `action` is applied."""
    handler = HANDLERS.get(type(action))
    if handler is None:
        logger.debug("reduce: ignoring unknown action %r", action)
        return state
    return handler(state, action)
