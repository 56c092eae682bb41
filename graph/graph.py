"""
graph.py — Graph Container
==========================
Single source of truth for the structure being edited.  The reducer,
the algorithms and the serialiser all talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Structural queries                     (adjacency, find_edge, …)
  3. Status reset                           (wipe colours, keep structure)
  4. Deep copy                              (history snapshots)
  5. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id for O(1) lookup.
    Insertion order is meaningful: every algorithm iterates in it.
  - No adjacency is stored.  `adjacency()` rebuilds it from the edge
    list each call, so a snapshot handed to an algorithm is all it needs.
  - Undirected only.  At most one edge per unordered pair of nodes;
    `add_edge` itself does not enforce that, the reducer does.
"""

from typing import Dict, List, Tuple, Optional

from graph.node import Node
from graph.edge import Edge


class GraphFormatError(ValueError):
    """Raised when a serialised graph cannot be read."""


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {edge_id: Edge}
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        return node

    def create_node(self, x: float, y: float, label: Optional[str] = None, node_id: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(x=x, y=y, label=label, node_id=node_id))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        for eid in [e.id for e in self.incident_edges(node_id)]:
            self.remove_edge(eid)
        del self.nodes[node_id]

    def get_node(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1, edge_id: Optional[str] = None) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        self.edges.pop(edge_id, None)

    def get_edge(self, edge_id: Optional[str]) -> Optional[Edge]:
        if edge_id is None:
            return None
        return self.edges.get(edge_id)

    def find_edge(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b, whichever way round it was stored."""
        for e in self.edges.values():
            if e.connects(a, b):
                return e
        return None

    def has_edge_between(self, a: str, b: str) -> bool:
        return self.find_edge(a, b) is not None

    def incident_edges(self, node_id: str) -> List[Edge]:
        return [e for e in self.edges.values() if e.touches(node_id)]

    # ==================================================================
    # ADJACENCY
    # ==================================================================
    def adjacency(self) -> Dict[str, List[Tuple[str, float]]]:
        """
        {node_id: [(neighbour_id, weight), …]} built in one pass over the
        edges, inserting both directions.  Every node gets an entry.
        """
        adj: Dict[str, List[Tuple[str, float]]] = {nid: [] for nid in self.nodes}
        for e in self.edges.values():
            adj.setdefault(e.source, []).append((e.target, e.weight))
            adj.setdefault(e.target, []).append((e.source, e.weight))
        return adj

    # ==================================================================
    # LABELS
    # ==================================================================
    def next_label(self) -> str:
        """1 + the largest numeric label in use.  Non-numeric labels are ignored."""
        highest = 0
        for node in self.nodes.values():
            try:
                highest = max(highest, int(node.label))
            except (TypeError, ValueError):
                continue
        return str(highest + 1)

    def label_of(self, node_id: Optional[str]) -> str:
        node = self.get_node(node_id)
        return node.label if node else str(node_id)

    # ==================================================================
    # RESET (keep structure, wipe status)
    # ==================================================================
    def reset_status(self) -> None:
        for node in self.nodes.values():
            node.reset()
        for edge in self.edges.values():
            edge.reset()

    def copy(self) -> "Graph":
        """Deep copy — shares no Node / Edge objects with self."""
        g = Graph()
        for node in self.nodes.values():
            g.add_node(node.copy())
        for edge in self.edges.values():
            g.add_edge(edge.copy())
        return g

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Read the persisted {nodes: [...], edges: [...]} shape.  Statuses are
        kept as stored.  Edges pointing at missing nodes are dropped so the
        endpoint invariant always holds.
        """
        if not isinstance(data, dict):
            raise GraphFormatError("graph data must be an object with 'nodes' and 'edges'")

        g = cls()
        try:
            for nd in data.get("nodes", []):
                if not isinstance(nd, dict):
                    raise GraphFormatError(f"node entry {nd!r} is not an object")
                g.add_node(Node.from_dict(nd))
            for ed in data.get("edges", []):
                if not isinstance(ed, dict):
                    raise GraphFormatError(f"edge entry {ed!r} is not an object")
                edge = Edge.from_dict(ed)
                if edge.source in g.nodes and edge.target in g.nodes:
                    g.add_edge(edge)
        except (KeyError, TypeError, ValueError) as e:
            raise GraphFormatError(f"invalid graph data: {e}") from e
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def is_empty(self) -> bool:
        return not self.nodes

    def __eq__(self, other) -> bool:
        return isinstance(other, Graph) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
