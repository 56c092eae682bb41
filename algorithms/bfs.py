"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS traversal from a start node.  Yields a Step at every
meaningful event:
  1. Start node enqueued                   →  visitNode
  2. Dequeue a node                        →  processNode
  3. Examine each neighbour's edge         →  visitEdge
  4. Neighbour is new                      →  traverseEdge (edge + neighbour)
     neighbour already seen                →  skipEdge
  5. All neighbours examined               →  completeNode
  6. Queue empty                           →  done (visit count + order)

Neighbours are examined in adjacency order, so the discovery order is
reproducible for a given graph.
"""

from typing import Generator, Optional, List, Dict
from collections import deque

from graph import Graph
from algorithms.step import Step, StepKind, no_start_step


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",
    "    queue ← [start]",
    "    visited ← {start}",
    "    while queue is not empty:",
    "        node ← queue.dequeue()",
    "        for neighbour in adj(node):",
    "            if neighbour not visited:",
    "                visited.add(neighbour)",
    "                parent[neighbour] ← node",
    "                queue.enqueue(neighbour)",
    "        node is complete",
    "    return visited",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, start: Optional[str]) -> Generator[Step, None, None]:
    """
    Yields Step values for a breadth-first traversal from `start`.

    Args:
        graph : The graph snapshot to search.  Never modified.
        start : Start node id.  Missing or unknown → a single `done` step.
    """
    if graph.get_node(start) is None:
        yield no_start_step("BFS")
        return

    adj     = graph.adjacency()
    queue   = deque([start])
    visited = {start}
    order:  List[str] = [start]
    parent: Dict[str, Optional[str]] = {start: None}

    yield Step(
        StepKind.VISIT_NODE,
        node_id=start,
        message=f"Starting BFS from node {graph.label_of(start)}",
        path_note=f"Start at node {graph.label_of(start)}",
    )

    # --- main loop ---
    while queue:
        node = queue.popleft()
        label = graph.label_of(node)

        yield Step(
            StepKind.PROCESS_NODE,
            node_id=node,
            message=f"Processing node {label}",
        )

        for nbr, _ in adj.get(node, []):
            edge = graph.find_edge(node, nbr)
            nbr_label = graph.label_of(nbr)

            if edge is not None:
                yield Step(
                    StepKind.VISIT_EDGE,
                    edge_id=edge.id,
                    message=f"Examining edge from {label} to neighbour {nbr_label}",
                )

            if nbr not in visited:
                visited.add(nbr)
                order.append(nbr)
                parent[nbr] = node
                queue.append(nbr)

                if edge is not None:
                    yield Step(
                        StepKind.TRAVERSE_EDGE,
                        node_id=nbr,
                        edge_id=edge.id,
                        message=f"Visiting neighbour {nbr_label}",
                        path_note=f"{label} → {nbr_label}",
                    )
            elif edge is not None:
                yield Step(
                    StepKind.SKIP_EDGE,
                    edge_id=edge.id,
                    message=f"Neighbour {nbr_label} already visited",
                )

        yield Step(
            StepKind.COMPLETE_NODE,
            node_id=node,
            message=f"Finished processing node {label}",
        )

    yield Step(
        StepKind.DONE,
        message=f"BFS completed. Visited {len(visited)} nodes.",
        path_note="BFS order: " + " → ".join(graph.label_of(n) for n in order),
    )
