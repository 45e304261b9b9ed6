"""Segment storage and the head-first body chain."""

from __future__ import annotations

from collections.abc import Iterator

from chain_snake.direction import Direction


class SegmentArena:
    """Positions of live segments, keyed by stable integer handles.

    Handles are never reused, so a stale handle always fails loudly
    instead of silently aliasing a newer segment.
    """

    def __init__(self) -> None:
        self._positions: dict[int, tuple[int, int]] = {}
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, handle: int) -> bool:
        return handle in self._positions

    def spawn(self, cell: tuple[int, int]) -> int:
        """Create a segment at *cell* and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._positions[handle] = cell
        return handle

    def position(self, handle: int) -> tuple[int, int]:
        try:
            return self._positions[handle]
        except KeyError:
            raise KeyError(f"Segment {handle} does not exist.") from None

    def move(self, handle: int, cell: tuple[int, int]) -> None:
        if handle not in self._positions:
            raise KeyError(f"Segment {handle} does not exist.")
        self._positions[handle] = cell

    def release(self, handle: int) -> None:
        if self._positions.pop(handle, None) is None:
            raise KeyError(f"Segment {handle} does not exist.")


class BodyChain:
    """Ordered segment handles, head first and tail last.

    The chain owns the order; positions live in the :class:`SegmentArena`.
    Each segment trails its predecessor by one tick, which after a growth
    event is not necessarily one cell.
    """

    def __init__(self, arena: SegmentArena, head_cell: tuple[int, int]) -> None:
        self.arena = arena
        self.handles: list[int] = [arena.spawn(head_cell)]

    def __len__(self) -> int:
        return len(self.handles)

    def __iter__(self) -> Iterator[int]:
        return iter(self.handles)

    @property
    def head(self) -> int:
        return self.handles[0]

    @property
    def tail(self) -> int:
        return self.handles[-1]

    @property
    def head_cell(self) -> tuple[int, int]:
        return self.arena.position(self.head)

    @property
    def tail_cell(self) -> tuple[int, int]:
        return self.arena.position(self.tail)

    def cells(self) -> list[tuple[int, int]]:
        """Return segment positions in chain order."""
        return [self.arena.position(h) for h in self.handles]

    def advance(self, direction: Direction) -> tuple[int, int]:
        """Move the head one cell and shift the body down by one slot.

        Returns the cell the tail occupied before the move.
        """
        old_tail = self.tail_cell
        if direction is Direction.NONE:
            return old_tail

        dr, dc = direction.value
        r, c = self.head_cell
        carried = (r, c)
        self.arena.move(self.head, (r + dr, c + dc))

        # Each segment takes the pre-move cell of its predecessor.
        for handle in self.handles[1:]:
            current = self.arena.position(handle)
            self.arena.move(handle, carried)
            carried = current
        return old_tail

    def append(self, cell: tuple[int, int]) -> int:
        """Attach a new tail segment at *cell*."""
        handle = self.arena.spawn(cell)
        self.handles.append(handle)
        return handle

    def truncate(self) -> None:
        """Drop every segment except the head."""
        for handle in self.handles[1:]:
            self.arena.release(handle)
        del self.handles[1:]

    def to_dict(self) -> dict:
        """Serialize chain state to a dictionary."""
        return {
            "handles": list(self.handles),
            "cells": [list(cell) for cell in self.cells()],
        }
