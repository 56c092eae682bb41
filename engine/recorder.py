"""
recorder.py — Run Recorder & Comparison
========================================
Runs an algorithm to completion on a graph snapshot, keeps every Step,
and summarises the run for the analytics panel and comparison mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="prim", graph=g, start="a1")
    summary = rec.run_to_completion()
    rec.export()                       # serialisable snapshot

Comparison mode:
    Record two runs on the SAME graph (typically Prim vs Kruskal) and call
    compare(left, right) → ComparisonResult.
"""

import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from graph import Graph
from algorithms import AlgoInfo, create_producer, get_algorithm
from algorithms.step import Step, StepKind

_TREE_KINDS = (StepKind.ADD_TO_MST, StepKind.TRAVERSE_EDGE)
_REACH_KINDS = (StepKind.VISIT_NODE, StepKind.TRAVERSE_EDGE, StepKind.ADD_TO_MST)


# ---------------------------------------------------------------------------
# Summary dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunSummary:
    algo_key:       str             = ""
    algo_label:     str             = ""
    start:          Optional[str]   = None
    total_steps:    int             = 0
    total_cost:     Optional[float] = None
    tree_edge_ids:  List[str]       = field(default_factory=list)   # MST / traversal-tree edges
    reached:        List[str]       = field(default_factory=list)   # node ids in the order first reached
    complete:       bool            = False
    final_message:  str             = ""
    wall_time_ms:   float           = 0.0


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side summaries
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:        RunSummary = field(default_factory=RunSummary)
    right:       RunSummary = field(default_factory=RunSummary)
    same_cost:   bool       = False
    fewer_steps: str        = ""    # label of the run with fewer steps, or "tie"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        summary : Computed RunSummary (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.summary: Optional[RunSummary] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._graph:     Optional[Graph]    = None
        self._start:     Optional[str]      = None
        self._generator = None

    def start(self, algo_key: str, graph: Graph, start: Optional[str] = None) -> None:
        """Initialise the generator for this run over a private copy of `graph`."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._graph     = graph.copy()
        self._start     = start
        self.steps      = []
        self.summary    = None
        self._generator = create_producer(algo_key, self._graph, start)

    def run_to_completion(self) -> RunSummary:
        """Exhaust the generator, record every step, compute the summary."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.steps = list(self._generator)
        wall_ms = (time.monotonic() - started) * 1000

        self.summary = self._summarise(wall_ms)
        return self.summary

    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "start":    self._start,
            "graph":    self._graph.to_dict() if self._graph else {},
            "summary":  asdict(self.summary) if self.summary else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _summarise(self, wall_ms: float) -> RunSummary:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        tree_edges: List[str] = []
        reached: List[str] = []
        for s in self.steps:
            if s.kind in _TREE_KINDS and s.edge_id is not None:
                tree_edges.append(s.edge_id)
            if s.kind in _REACH_KINDS and s.node_id is not None and s.node_id not in reached:
                reached.append(s.node_id)

        # a lone `done` means the run never got going (bad start node)
        started = len(self.steps) > 1
        return RunSummary(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            start=self._start,
            total_steps=len(self.steps),
            total_cost=last.total_cost if last else None,
            tree_edge_ids=tree_edges,
            reached=reached,
            complete=bool(last and last.is_final and not last.incomplete and started),
            final_message=last.message if last else "",
            wall_time_ms=round(wall_ms, 2),
        )


def record(algo_key: str, graph: Graph, start: Optional[str] = None) -> RunSummary:
    """One-shot helper: start + run_to_completion."""
    rec = Recorder()
    rec.start(algo_key, graph, start)
    return rec.run_to_completion()


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: RunSummary, right: RunSummary) -> ComparisonResult:
    """Given two completed runs, produce a ComparisonResult."""
    if left.total_steps == right.total_steps:
        fewer = "tie"
    else:
        fewer = left.algo_label if left.total_steps < right.total_steps else right.algo_label

    return ComparisonResult(
        left=left,
        right=right,
        same_cost=left.total_cost is not None and left.total_cost == right.total_cost,
        fewer_steps=fewer,
    )
