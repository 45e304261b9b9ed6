"""Tick-driven simulation composing the chain, food and growth logic."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from chain_snake.chain import BodyChain, SegmentArena
from chain_snake.clock import TickGate
from chain_snake.collision import Collision, detect_collision
from chain_snake.config import SimulationConfig, TerminationPolicy
from chain_snake.direction import Direction, DirectionResolver
from chain_snake.food import FoodPlacer
from chain_snake.grid import Grid
from chain_snake.growth import PendingGrowth

logger = logging.getLogger(__name__)


class SimulationStatus(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class EventKind(enum.Enum):
    """Notifications for renderers and audio."""

    GREW = "grew"
    FOOD_PLACED = "food_placed"
    TERMINATED = "terminated"
    RESTARTED = "restarted"


@dataclass(frozen=True)
class TickEvent:
    """Something observable that happened during a tick."""

    kind: EventKind
    cell: tuple[int, int] | None = None
    reason: Collision | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "cell": list(self.cell) if self.cell is not None else None,
            "reason": self.reason.value if self.reason is not None else None,
        }


class Simulation:
    """Single-snake simulation advanced by a fixed-interval tick.

    Call :meth:`frame` once per rendered frame with the player's requested
    direction; it commits the direction and runs :meth:`step` only when
    the tick gate fires. :meth:`step` can also be driven directly.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        cfg = config or SimulationConfig()
        self.config = cfg
        self.clock = clock
        self.rng = np.random.default_rng(cfg.seed)
        self.grid = Grid(width=cfg.grid_width, height=cfg.grid_height)
        self.food_placer = FoodPlacer(
            self.grid, rng=self.rng, max_attempts=cfg.max_placement_attempts,
        )
        self.gate = TickGate(cfg.step_interval)
        self.resolver = DirectionResolver(cfg.initial_direction)
        self.growth = PendingGrowth()

        self.arena = SegmentArena()
        self.chain = BodyChain(self.arena, cfg.start_cell)
        self.food: tuple[int, int] | None = None
        self.status = SimulationStatus.RUNNING
        self.tick = 0
        self.terminations = 0

        self._place_food()
        self._repaint()

    def frame(
        self,
        requested: Direction | None = None,
        now: float | None = None,
    ) -> list[TickEvent]:
        """Process one rendered frame.

        The first frame only sets the gate's baseline time, so *now* may
        come from any monotonic source. Returns the events of the tick
        that ran, or an empty list when no tick was due.
        """
        self.resolver.request(requested)
        if now is None:
            now = self.clock()
        if not self.gate.update(now):
            return []
        return self.step()

    def step(self) -> list[TickEvent]:
        """Advance the simulation by exactly one tick."""
        if self.status is SimulationStatus.TERMINATED:
            return []

        events: list[TickEvent] = []
        direction = self.resolver.commit()
        self.chain.advance(direction)

        # --- deferred growth ---
        cells = self.chain.cells()
        spawn = self.growth.on_tick(self.chain.tail_cell, occupied=cells)
        if spawn is not None:
            self.chain.append(spawn)
            events.append(TickEvent(EventKind.GREW, spawn))
            logger.debug("Grew to length %d at %s.", len(self.chain), spawn)
            self.growth.resume_backlog(self.chain.tail_cell)
            cells = self.chain.cells()

        # --- collisions ---
        hit = detect_collision(cells, self.food, self.grid.in_bounds)
        if hit is Collision.FOOD:
            self.growth.start(self.chain.tail_cell)
            events.extend(self._place_food())
        elif hit is not Collision.NONE:
            events.extend(self._terminate(hit))

        # A full board left no food; retry once a cell has opened up.
        if (
            self.food is None
            and self.status is SimulationStatus.RUNNING
            and len(self._occupied()) < self.grid.cell_count
        ):
            events.extend(self._place_food())

        self.tick += 1
        self._repaint()
        return events

    def reset(self) -> None:
        """Restore the starting layout and restart the tick counter."""
        self._restart()
        self.tick = 0
        self.gate.reset()
        self._repaint()

    def get_state(self) -> dict:
        """Return the full, serializable simulation state."""
        return {
            "tick": self.tick,
            "status": self.status.value,
            "head": list(self.chain.head_cell),
            "segments": [list(cell) for cell in self.chain.cells()],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.resolver.committed.name,
            "growth": self.growth.to_dict(),
            "terminations": self.terminations,
            "grid": self.grid.to_dict(),
        }

    def _occupied(self) -> set[tuple[int, int]]:
        occupied = set(self.chain.cells())
        if self.growth.spawn_cell is not None:
            occupied.add(self.growth.spawn_cell)
        return occupied

    def _place_food(self) -> list[TickEvent]:
        self.food = self.food_placer.place(self._occupied())
        if self.food is None:
            return []
        logger.debug("Food placed at %s.", self.food)
        return [TickEvent(EventKind.FOOD_PLACED, self.food)]

    def _terminate(self, reason: Collision) -> list[TickEvent]:
        head = self.chain.head_cell
        length = len(self.chain)
        self.chain.truncate()
        self.growth.clear()
        self.terminations += 1
        logger.info(
            "Terminated by %s collision at tick %d with length %d.",
            reason.value, self.tick + 1, length,
        )
        events = [TickEvent(EventKind.TERMINATED, head, reason)]
        if self.config.termination_policy is TerminationPolicy.RESTART:
            events.extend(self._restart())
        else:
            self.status = SimulationStatus.TERMINATED
        return events

    def _restart(self) -> list[TickEvent]:
        cfg = self.config
        self.arena = SegmentArena()
        self.chain = BodyChain(self.arena, cfg.start_cell)
        self.resolver.reset(cfg.initial_direction)
        self.growth.clear()
        self.status = SimulationStatus.RUNNING
        logger.info("Simulation restarted at %s.", cfg.start_cell)
        events = [TickEvent(EventKind.RESTARTED, cfg.start_cell)]
        events.extend(self._place_food())
        return events

    def _repaint(self) -> None:
        self.grid.render(self.chain.cells(), self.food)
