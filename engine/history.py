"""
history.py — Undo / Redo History
=================================
A bounded, linear list of graph snapshots plus a cursor.

    h = History.start(Graph())
    h = h.push(graph_after_edit)      # drops any redo states first
    h, graph = h.undo()               # None graph if nothing to undo

Every snapshot is a deep copy taken on the way in, and every restore
hands out another copy, so nothing outside can alter a stored entry.
History values are immutable: each operation returns a new History.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from graph import Graph


@dataclass(frozen=True)
class History:
    snapshots: Tuple[Graph, ...]
    cursor:    int
    limit:     int

    @classmethod
    def start(cls, graph: Graph, limit: int) -> "History":
        return cls(snapshots=(graph.copy(),), cursor=0, limit=max(1, limit))

    def push(self, graph: Graph) -> "History":
        """Discard redo states, append a copy of `graph`, trim to `limit`."""
        kept = self.snapshots[: self.cursor + 1] + (graph.copy(),)
        if len(kept) > self.limit:
            kept = kept[len(kept) - self.limit:]
        return History(snapshots=kept, cursor=len(kept) - 1, limit=self.limit)

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.snapshots) - 1

    def undo(self) -> Tuple["History", Optional[Graph]]:
        if not self.can_undo:
            return self, None
        moved = History(self.snapshots, self.cursor - 1, self.limit)
        return moved, moved.current()

    def redo(self) -> Tuple["History", Optional[Graph]]:
        if not self.can_redo:
            return self, None
        moved = History(self.snapshots, self.cursor + 1, self.limit)
        return moved, moved.current()

    def current(self) -> Graph:
        return self.snapshots[self.cursor].copy()

    def __len__(self) -> int:
        return len(self.snapshots)
