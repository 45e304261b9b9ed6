"""Food placement on free grid cells."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from chain_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Chooses a free cell for the food item.

    Cells are drawn uniformly by rejection sampling against the occupied
    set. After *max_attempts* misses the placer falls back to scanning
    the grid for free cells, so placement terminates however crowded the
    board is. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def place(
        self, occupied: Collection[tuple[int, int]],
    ) -> tuple[int, int] | None:
        """Return a cell not in *occupied*, or ``None`` if none is left."""
        blocked = set(occupied)
        for _ in range(self.max_attempts):
            cell = (
                int(self.rng.integers(self.grid.height)),
                int(self.rng.integers(self.grid.width)),
            )
            if cell not in blocked:
                return cell

        logger.debug(
            "Rejection sampling missed %d times; scanning for free cells.",
            self.max_attempts,
        )
        return self._scan(blocked)

    def _scan(self, blocked: set[tuple[int, int]]) -> tuple[int, int] | None:
        from chain_snake.grid import CellType, Grid

        mask = Grid(self.grid.width, self.grid.height)
        mask.paint(blocked, CellType.SEGMENT)
        free = mask.empty_cells()
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]
