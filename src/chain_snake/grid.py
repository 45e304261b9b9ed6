"""World rectangle and per-tick occupancy snapshot."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SEGMENT = 1
    FOOD = 2


class Grid:
    """Bounds of the world plus what sits on each cell after a tick.

    ``cells`` is indexed ``[row, col]`` and is what renderers read. The
    simulation rebuilds it with :meth:`render` after every tick.
    """

    def __init__(self, width: int = 16, height: int = 12) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def paint(
        self, cells: Iterable[tuple[int, int]], cell_type: CellType,
    ) -> None:
        """Mark every in-bounds coordinate in *cells* with *cell_type*."""
        for r, c in cells:
            if self.in_bounds(r, c):
                self.cells[r, c] = cell_type

    def render(
        self,
        segments: Iterable[tuple[int, int]],
        food: tuple[int, int] | None,
    ) -> None:
        """Replace the snapshot with *segments* and *food*."""
        self.cells.fill(CellType.EMPTY)
        self.paint(segments, CellType.SEGMENT)
        if food is not None:
            self.paint([food], CellType.FOOD)

    def empty_cells(self) -> list[tuple[int, int]]:
        """Free coordinates in row-major order."""
        rows, cols = np.nonzero(self.cells == CellType.EMPTY)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
