"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Generator-based Kruskal.  Considers every edge cheapest-first and keeps
the ones that join two different components.

Yields a Step at:
  1. Start                                 →  info (edge count)
  2. Each edge in sorted order             →  visitEdge
  3. Edge joins two components             →  addToMST
     edge would close a cycle              →  skipEdge
  4. |V| - 1 edges accepted / edges run out →  done

Sorting is stable, so equal weights are taken in the order the edges
were drawn.  No start node is needed.
"""

from typing import Dict, Generator, Iterable, List

from graph import Graph, Edge
from algorithms.step import Step, StepKind, describe_edge, format_cost


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",
    "    dsu ← DisjointSet(V)",
    "    edges ← sort(E) by weight",
    "    for (u, v, w) in edges:",
    "        if dsu.find(u) ≠ dsu.find(v):",
    "            dsu.union(u, v); cost += w",
    "            if |MST| = |V| - 1: break",
    "        else: skip (cycle)",
    "    return MST, cost",
]


# ---------------------------------------------------------------------------
# Disjoint-set union
# ---------------------------------------------------------------------------
class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, items: Iterable[str]):
        self.parent: Dict[str, str] = {}
        self.rank:   Dict[str, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, item: str) -> str:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def kruskal(graph: Graph) -> Generator[Step, None, None]:
    """Yields Step values for Kruskal's algorithm over the whole graph."""

    dsu = DisjointSet(graph.node_ids())
    sorted_edges = sorted(graph.edges.values(), key=lambda e: e.weight)
    needed = graph.node_count() - 1
    mst_edges: List[Edge] = []
    total_cost: float = 0

    yield Step(
        StepKind.INFO,
        message=f"Starting Kruskal's algorithm with {len(sorted_edges)} edges",
        path_note=f"Sort {len(sorted_edges)} edges by weight",
    )

    for edge in sorted_edges:
        yield Step(
            StepKind.VISIT_EDGE,
            edge_id=edge.id,
            message=f"Considering edge {describe_edge(graph, edge)}",
        )

        if dsu.find(edge.source) != dsu.find(edge.target):
            dsu.union(edge.source, edge.target)
            mst_edges.append(edge)
            total_cost += edge.weight

            yield Step(
                StepKind.ADD_TO_MST,
                node_id=edge.target,
                edge_id=edge.id,
                message=(
                    f"Adding edge {describe_edge(graph, edge)} to MST. "
                    f"Current cost: {format_cost(total_cost)}"
                ),
                path_note=f"Add edge {describe_edge(graph, edge)}",
            )

            if len(mst_edges) == needed:
                break
        else:
            yield Step(
                StepKind.SKIP_EDGE,
                edge_id=edge.id,
                message=f"Skipping edge {describe_edge(graph, edge)} as it would create a cycle",
            )

    listed = ", ".join(describe_edge(graph, e) for e in mst_edges) or "no edges"

    if len(mst_edges) < needed:
        yield Step(
            StepKind.DONE,
            message=(
                f"Graph is disconnected, MST cannot be completed. "
                f"Partial cost: {format_cost(total_cost)}"
            ),
            path_note=f"Partial MST: {listed}; total cost {format_cost(total_cost)}",
            total_cost=total_cost,
            incomplete=True,
        )
    else:
        yield Step(
            StepKind.DONE,
            message=(
                f"Kruskal's algorithm completed. MST has {len(mst_edges)} edges. "
                f"Total cost: {format_cost(total_cost)}"
            ),
            path_note=f"MST: {listed}; total cost {format_cost(total_cost)}",
            total_cost=total_cost,
        )
