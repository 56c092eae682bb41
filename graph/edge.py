"""
edge.py — Graph Edge
====================
Connects two nodes with a positive weight.  Every edge is undirected:
(source, target) and (target, source) describe the same connection.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and snapshots cheap to copy.
  - On the wire the endpoints are called `from` / `to`; `from` is a
    Python keyword, hence the attribute names.
  - Weight defaults to 1.  Any positive real works; the editor only
    produces integers.
"""

import math
from enum import Enum
from typing import Optional

from graph.node import new_id


def is_valid_weight(value) -> bool:
    """A finite positive int or float.  Booleans are not weights."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


# ---------------------------------------------------------------------------
# Edge Status Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeStatus(Enum):
    DEFAULT  = "default"    # thin, neutral
    SELECTED = "selected"   # picked in the editor
    MST      = "mst"        # part of a finished spanning tree
    VISITED  = "visited"    # confirmed by the algorithm (MST edge or traversal edge)
    CURRENT  = "current"    # being examined RIGHT NOW


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id      : Unique identifier.
        source  : ID of one endpoint (serialised as `from`).
        target  : ID of the other endpoint (serialised as `to`).
        weight  : Numeric cost (default 1).
        status  : EdgeStatus for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "status")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1,
        edge_id: Optional[str] = None,
        status: EdgeStatus = EdgeStatus.DEFAULT,
    ):
        self.id:     str        = edge_id or new_id()
        self.source: str        = source
        self.target: str        = target
        self.weight: float      = weight
        self.status: EdgeStatus = status

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.status = EdgeStatus.DEFAULT

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b, in either order."""
        return (
            (self.source == node_a and self.target == node_b)
            or (self.source == node_b and self.target == node_a)
        )

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def copy(self) -> "Edge":
        return Edge(self.source, self.target, weight=self.weight, edge_id=self.id, status=self.status)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "from":   self.source,
            "to":     self.target,
            "weight": self.weight,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        weight = data.get("weight", 1)
        if not is_valid_weight(weight):
            raise ValueError(f"edge {data.get('id')!r}: weight must be a positive number, got {weight!r}")
        return cls(
            source=str(data["from"]),
            target=str(data["to"]),
            weight=weight,
            edge_id=str(data["id"]),
            status=EdgeStatus(data.get("status", "default")),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight}, status={self.status.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)
