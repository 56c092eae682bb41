"""
state.py — Application State
=============================
Everything the editor and the renderer need, in one immutable value.
Only the reducer builds new AppState values; everybody else reads.

`visited` and `completed` are the node ids the current run has reached /
finished.  They exist only to resolve which colour wins when a node is
touched by several steps; the colours themselves live on the graph.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

import config
from graph import Graph
from algorithms.step import Step
from engine.history import History


@dataclass(frozen=True)
class AppState:
    graph:             Graph
    history:           History
    selected_node_id:  Optional[str]   = None
    selected_edge_id:  Optional[str]   = None
    algorithm:         Optional[str]   = None     # "prim" | "kruskal" | "bfs" | "dfs"
    is_running:        bool            = False
    speed:             int             = config.DEFAULT_SPEED_MS
    current_step:      Optional[Step]  = None
    start_node_id:     Optional[str]   = None
    total_cost:        Optional[float] = None
    path:              Tuple[str, ...] = ()
    visited:           FrozenSet[str]  = field(default_factory=frozenset)
    completed:         FrozenSet[str]  = field(default_factory=frozenset)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def to_dict(self) -> dict:
        return {
            "graph":          self.graph.to_dict(),
            "selectedNodeId": self.selected_node_id,
            "selectedEdgeId": self.selected_edge_id,
            "algorithm":      self.algorithm,
            "isRunning":      self.is_running,
            "speed":          self.speed,
            "currentStep":    self.current_step.to_dict() if self.current_step else None,
            "startNodeId":    self.start_node_id,
            "totalCost":      self.total_cost,
            "path":           list(self.path),
            "canUndo":        self.can_undo,
            "canRedo":        self.can_redo,
        }


def initial_state(speed: Optional[int] = None, history_limit: Optional[int] = None) -> AppState:
    """Empty graph, nothing selected, history holding the empty graph."""
    graph = Graph()
    limit = history_limit if history_limit is not None else config.history_limit()
    return AppState(
        graph=graph,
        history=History.start(graph, limit),
        speed=speed if speed is not None else config.speed_ms(),
    )
