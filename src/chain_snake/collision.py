"""Post-move collision classification."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

# Chain entries directly behind the head that can never be a real hit.
NEAR_NECK = 2


class Collision(enum.Enum):
    """What the head ran into on this tick."""

    NONE = "none"
    WALL = "wall"
    SELF = "self"
    FOOD = "food"


def detect_collision(
    cells: Sequence[tuple[int, int]],
    food: tuple[int, int] | None,
    in_bounds: Callable[[int, int], bool],
) -> Collision:
    """Classify the head position of an already-advanced chain.

    Checked in order: boundary, body (skipping the near-neck entries),
    then food.
    """
    head = cells[0]
    if not in_bounds(head[0], head[1]):
        return Collision.WALL
    if any(seg == head for seg in cells[1 + NEAR_NECK:]):
        return Collision.SELF
    if food is not None and head == food:
        return Collision.FOOD
    return Collision.NONE
