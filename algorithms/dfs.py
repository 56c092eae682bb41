"""
dfs.py — Depth-First Search
=============================
Generator-based DFS with the step order of the textbook recursive version,
driven by an explicit stack of frames (no Python recursion limit issues).

Yields a Step at:
  1. First entry into a node               →  visitNode
  2. Each neighbour's edge                 →  currentEdge
  3. Neighbour unseen                      →  traverseEdge, then descend
     neighbour already seen                →  skipEdge
  4. All neighbours done (post-order)      →  completeNode
  5. Stack empty                           →  done (visit count + pre-order)

Each frame is (node, iterator over its adjacency list).  Descending pushes
a new frame; the parent's iterator resumes where it left off once the
child frame is popped, exactly like returning from a recursive call.
"""

from typing import Generator, Iterator, List, Optional, Tuple

from graph import Graph
from algorithms.step import Step, StepKind, no_start_step


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",
    "    visit(start)",
    "def visit(node):",
    "    visited.add(node)",
    "    for neighbour in adj(node):",
    "        if neighbour not visited:",
    "            visit(neighbour)",
    "    node is complete",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, start: Optional[str]) -> Generator[Step, None, None]:
    """
    Yields Step values for a depth-first traversal from `start`.

    Args:
        graph : The graph snapshot to search.  Never modified.
        start : Start node id.  Missing or unknown → a single `done` step.
    """
    if graph.get_node(start) is None:
        yield no_start_step("DFS")
        return

    adj = graph.adjacency()
    visited = {start}
    order: List[str] = [start]
    stack: List[Tuple[str, Iterator[Tuple[str, float]]]] = [(start, iter(adj.get(start, [])))]

    yield Step(
        StepKind.VISIT_NODE,
        node_id=start,
        message=f"Visiting node {graph.label_of(start)}",
        path_note=f"Start at node {graph.label_of(start)}",
    )

    while stack:
        node, neighbours = stack[-1]
        label = graph.label_of(node)
        nxt = next(neighbours, None)

        # -- backtrack --
        if nxt is None:
            stack.pop()
            yield Step(
                StepKind.COMPLETE_NODE,
                node_id=node,
                message=f"Finished processing node {label}",
            )
            continue

        nbr, _ = nxt
        nbr_label = graph.label_of(nbr)
        edge = graph.find_edge(node, nbr)

        if edge is not None:
            yield Step(
                StepKind.CURRENT_EDGE,
                edge_id=edge.id,
                message=f"Examining edge from {label} to neighbour {nbr_label}",
            )

        if nbr in visited:
            if edge is not None:
                yield Step(
                    StepKind.SKIP_EDGE,
                    edge_id=edge.id,
                    message=f"Neighbour {nbr_label} already visited",
                )
            continue

        if edge is not None:
            yield Step(
                StepKind.TRAVERSE_EDGE,
                node_id=nbr,
                edge_id=edge.id,
                message=f"Moving to neighbour {nbr_label}",
                path_note=f"{label} → {nbr_label}",
            )

        # -- descend --
        visited.add(nbr)
        order.append(nbr)
        stack.append((nbr, iter(adj.get(nbr, []))))
        yield Step(
            StepKind.VISIT_NODE,
            node_id=nbr,
            message=f"Visiting node {nbr_label}",
        )

    yield Step(
        StepKind.DONE,
        message=f"DFS completed. Visited {len(visited)} nodes.",
        path_note="DFS order: " + " → ".join(graph.label_of(n) for n in order),
    )
