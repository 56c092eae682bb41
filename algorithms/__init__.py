"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, create_producer

REGISTRY is a dict:
    {
        "prim": AlgoInfo(key, label, fn, pseudocode, requires_start, is_mst, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The stepper, the recorder and the
HTTP layer all consume it, so adding an algorithm is: write the
generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generator, List, Optional

from graph import Graph
from algorithms.step    import Step, StepKind
from algorithms.prim    import prim,    PSEUDOCODE as _prim_pc
from algorithms.kruskal import kruskal, PSEUDOCODE as _kruskal_pc
from algorithms.bfs     import bfs,     PSEUDOCODE as _bfs_pc
from algorithms.dfs     import dfs,     PSEUDOCODE as _dfs_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str            # registry key, e.g. "prim"
    label:            str            # human label, e.g. "Prim's MST"
    fn:               Callable       # the generator function
    pseudocode:       List[str]      # lines for the side-panel
    requires_start:   bool = True    # needs a start node?
    is_mst:           bool = False   # produces a total cost?
    complexity_time:  str  = ""
    complexity_space: str  = ""
    description:      str  = ""

    def to_dict(self) -> dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "pseudocode":      list(self.pseudocode),
            "requiresStart":   self.requires_start,
            "isMst":           self.is_mst,
            "complexityTime":  self.complexity_time,
            "complexitySpace": self.complexity_space,
            "description":     self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", fn=prim, pseudocode=_prim_pc,
        requires_start=True, is_mst=True,
        complexity_time="O(V · E)", complexity_space="O(V + E)",
        description="Grows one tree from the start node, always adding the cheapest crossing edge.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", fn=kruskal, pseudocode=_kruskal_pc,
        requires_start=False, is_mst=True,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives as deep as possible before backtracking.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: Optional[str]) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    if key is None:
        return None
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def create_producer(key: str, graph: Graph, start: Optional[str] = None) -> Generator[Step, None, None]:
    """Instantiate the step generator for `key` over `graph`."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    if info.requires_start:
        return info.fn(graph, start)
    return info.fn(graph)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Step",
    "StepKind",
    "get_algorithm",
    "list_algorithms",
    "create_producer",
    "prim",
    "kruskal",
    "bfs",
    "dfs",
]
