"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Generator-based Prim.  Grows a tree from the start node, one cheapest
crossing edge at a time.  Yields a Step at every meaningful event:
  1. Start node placed in the tree         →  visitNode
  2. Each crossing edge considered         →  visitEdge
  3. New cheapest candidate found          →  processNode (the far node)
     otherwise                             →  skipEdge
  4. Cheapest edge accepted                →  addToMST (edge + node)
  5. Tree spans the graph / cannot grow    →  done

Scan order is fixed: tree nodes in the order they joined, and within a
node its adjacency list in edge order.  Ties keep the first candidate
seen (strict `<`), so runs are reproducible.

If no crossing edge exists before every node is in the tree, the graph
is disconnected: the final step carries the partial cost and
`incomplete=True`.
"""

from typing import Generator, List, Dict, Optional

from graph import Graph, Edge
from algorithms.step import Step, StepKind, no_start_step, describe_edge, format_cost


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",
    "    tree ← {start}",
    "    while |tree| < |V|:",
    "        best ← ∞",
    "        for u in tree:",
    "            for (v, w) in adj(u) with v ∉ tree:",
    "                if w < best: best ← w, pick (u, v)",
    "        if nothing picked: return INCOMPLETE",
    "        tree.add(v); cost += best",
    "    return tree, cost",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def prim(graph: Graph, start: Optional[str]) -> Generator[Step, None, None]:
    """
    Yields Step values for Prim's algorithm rooted at `start`.

    Args:
        graph : The graph snapshot to run on.  Never modified.
        start : Start node id.  Missing or unknown → a single `done` step.
    """
    if graph.get_node(start) is None:
        yield no_start_step("Prim's algorithm")
        return

    adj = graph.adjacency()
    tree: Dict[str, None] = {start: None}     # dict keeps join order
    mst_edges: List[Edge] = []
    total_cost: float = 0

    start_label = graph.label_of(start)
    yield Step(
        StepKind.VISIT_NODE,
        node_id=start,
        message=f"Starting Prim's algorithm from node {start_label}",
        path_note=f"Start at node {start_label}",
    )

    while len(tree) < graph.node_count():
        best_weight = float("inf")
        best_edge: Optional[Edge] = None
        best_node: Optional[str] = None

        for u in tree:
            for v, weight in adj.get(u, []):
                if v in tree:
                    continue
                edge = graph.find_edge(u, v)
                if edge is None:
                    continue

                yield Step(
                    StepKind.VISIT_EDGE,
                    edge_id=edge.id,
                    message=f"Considering edge {describe_edge(graph, edge)}",
                )

                if weight < best_weight:
                    best_weight = weight
                    best_edge   = edge
                    best_node   = v
                    yield Step(
                        StepKind.PROCESS_NODE,
                        node_id=v,
                        message=(
                            f"Found better edge to node {graph.label_of(v)} "
                            f"with weight {format_cost(weight)}"
                        ),
                    )
                else:
                    yield Step(
                        StepKind.SKIP_EDGE,
                        edge_id=edge.id,
                        message=f"Skipping edge {describe_edge(graph, edge)}: a cheaper edge is already known",
                    )

        # nothing crosses the cut → the rest of the graph is unreachable
        if best_edge is None or best_node is None:
            yield Step(
                StepKind.DONE,
                message=(
                    f"Graph is disconnected, MST cannot be completed. "
                    f"Partial cost: {format_cost(total_cost)}"
                ),
                path_note=_summary(graph, mst_edges, total_cost, complete=False),
                total_cost=total_cost,
                incomplete=True,
            )
            return

        mst_edges.append(best_edge)
        total_cost += best_edge.weight
        tree[best_node] = None

        yield Step(
            StepKind.ADD_TO_MST,
            node_id=best_node,
            edge_id=best_edge.id,
            message=(
                f"Adding edge {describe_edge(graph, best_edge)} to MST and visiting "
                f"node {graph.label_of(best_node)}. Current cost: {format_cost(total_cost)}"
            ),
            path_note=f"Add edge {describe_edge(graph, best_edge)}",
        )

    yield Step(
        StepKind.DONE,
        message=(
            f"Prim's algorithm completed. MST has {len(mst_edges)} edges. "
            f"Total cost: {format_cost(total_cost)}"
        ),
        path_note=_summary(graph, mst_edges, total_cost, complete=True),
        total_cost=total_cost,
    )


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _summary(graph: Graph, edges: List[Edge], cost: float, complete: bool) -> str:
    listed = ", ".join(describe_edge(graph, e) for e in edges) or "no edges"
    head = "MST" if complete else "Partial MST"
    return f"{head}: {listed}; total cost {format_cost(cost)}"
