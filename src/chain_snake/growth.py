"""Deferred tail growth after eating."""

from __future__ import annotations

import logging
from collections.abc import Collection

logger = logging.getLogger(__name__)


class PendingGrowth:
    """Two-phase latch appending a segment once the tail has moved off.

    Eating records the tail's cell. On the first due tick after that the
    tail leaves the cell and the latch opens; on the following due tick
    the caller appends a new segment there. Food eaten while a growth is
    in flight is kept in :attr:`backlog` and starts from the tail once the
    current growth resolves.
    """

    def __init__(self) -> None:
        self.spawn_cell: tuple[int, int] | None = None
        self.waiting = False
        self.backlog = 0

    @property
    def pending(self) -> bool:
        return self.spawn_cell is not None

    def start(self, tail_cell: tuple[int, int]) -> None:
        """Record a growth event at *tail_cell*, or queue it if one is live."""
        if self.pending:
            self.backlog += 1
            logger.debug("Growth already pending; backlog is now %d.", self.backlog)
            return
        self.spawn_cell = tail_cell
        self.waiting = True

    def on_tick(
        self,
        tail_cell: tuple[int, int],
        occupied: Collection[tuple[int, int]] = (),
    ) -> tuple[int, int] | None:
        """Advance the latch after the chain moved.

        Returns the cell to append a segment at, or ``None``. *occupied*
        holds the post-move segment cells.
        """
        if self.spawn_cell is None:
            return None
        if self.waiting:
            if tail_cell != self.spawn_cell:
                self.waiting = False
            return None
        if self.spawn_cell in occupied:
            # The head looped back over the spawn cell; chase the tail again.
            logger.debug("Spawn cell %s reoccupied; re-arming.", self.spawn_cell)
            self.spawn_cell = tail_cell
            self.waiting = True
            return None

        cell = self.spawn_cell
        self.spawn_cell = None
        return cell

    def resume_backlog(self, tail_cell: tuple[int, int]) -> bool:
        """Start the next queued growth from *tail_cell*, if any."""
        if self.pending or self.backlog == 0:
            return False
        self.backlog -= 1
        self.start(tail_cell)
        return True

    def clear(self) -> None:
        self.spawn_cell = None
        self.waiting = False
        self.backlog = 0

    def to_dict(self) -> dict:
        return {
            "spawn_cell": list(self.spawn_cell) if self.spawn_cell else None,
            "waiting": self.waiting,
            "backlog": self.backlog,
        }
