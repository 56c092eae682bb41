"""
node.py — Graph Node
====================
A vertex on the editor canvas.  Carries its position, a user-facing label
and a status the renderer maps to a colour.

Design decisions:
  - `id` is an opaque string.  Labels are what the user sees and need not
    be unique (the editor numbers them 1, 2, 3, … by convention).
  - `status` is written by the reducer only.  Algorithms never touch it;
    they yield Steps and the reducer derives the colour.
"""

from enum import Enum
from typing import Optional
import uuid


# ---------------------------------------------------------------------------
# Node Status Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    DEFAULT    = "default"     # neutral
    SELECTED   = "selected"    # picked in the editor
    VISITED    = "visited"     # reached by the running algorithm
    CURRENT    = "current"     # the node the algorithm is focused on RIGHT NOW
    START      = "start"       # designated start node
    COMPLETED  = "completed"   # finished / part of the MST


def new_id() -> str:
    return str(uuid.uuid4())[:8]


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id      : Unique identifier (short uuid by default, or caller-supplied).
        label   : Human-readable name shown on the canvas.
        x, y    : Canvas coordinates.  Owned by the editor, never by algorithms.
        status  : Current NodeStatus for visual encoding.
    """

    __slots__ = ("id", "label", "x", "y", "status")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
        status: NodeStatus = NodeStatus.DEFAULT,
    ):
        self.id: str            = node_id or new_id()
        self.label: str         = label if label is not None else self.id
        self.x: float           = x
        self.y: float           = y
        self.status: NodeStatus = status

    def reset(self) -> None:
        self.status = NodeStatus.DEFAULT

    def copy(self) -> "Node":
        return Node(x=self.x, y=self.y, label=self.label, node_id=self.id, status=self.status)

    # ------------------------------------------------------------------
    # Serialisation  (the persisted {id, x, y, label, status} shape)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "x":      self.x,
            "y":      self.y,
            "label":  self.label,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=str(data["label"]) if data.get("label") is not None else None,
            node_id=str(data["id"]),
            status=NodeStatus(data.get("status", "default")),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, status={self.status.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)
