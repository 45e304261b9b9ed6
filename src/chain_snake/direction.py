"""Movement directions and per-frame direction resolution."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    NONE = (0, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}


class DirectionResolver:
    """Turns raw direction requests into the direction applied on a tick.

    :meth:`request` runs every frame so quick key presses between ticks
    are not lost; :meth:`commit` runs only when a tick is due. Requests
    are checked against the *committed* direction, so the last valid
    request before a tick wins.
    """

    def __init__(self, initial: Direction = Direction.NONE) -> None:
        self.committed = initial
        self.next = initial

    def request(self, direction: Direction | None) -> None:
        """Buffer *direction* for the next tick, ignoring 180° reversals."""
        if direction is None or direction is Direction.NONE:
            return
        if direction is self.committed.opposite:
            return
        self.next = direction

    def commit(self) -> Direction:
        """Apply the buffered direction and return it."""
        self.committed = self.next
        return self.committed

    def reset(self, direction: Direction = Direction.NONE) -> None:
        self.committed = direction
        self.next = direction
