"""Simulation configuration."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from chain_snake.direction import Direction

logger = logging.getLogger(__name__)


class TerminationPolicy(enum.Enum):
    """What the simulation does after the head hits a wall or itself."""

    # Truncate the body, leave head, direction and food alone, stop ticking.
    FREEZE = "freeze"
    # Put everything back to the starting layout and keep ticking.
    RESTART = "restart"


@dataclass(frozen=True)
class SimulationConfig:
    """Grid size, timing and policy for a single simulation.

    Supports JSON serialization for reproducibility.
    """

    grid_width: int = 16
    grid_height: int = 12
    step_interval: float = 0.25
    start_row: int | None = None
    start_col: int | None = None
    initial_direction: Direction = Direction.NONE
    max_placement_attempts: int = 1_000
    termination_policy: TerminationPolicy = TerminationPolicy.FREEZE
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError("grid_width and grid_height must each be at least 2.")
        if self.step_interval <= 0:
            raise ValueError("step_interval must be positive.")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be at least 1.")
        row, col = self.start_cell
        if not (0 <= row < self.grid_height and 0 <= col < self.grid_width):
            raise ValueError("start_row/start_col must lie inside the grid.")

    @property
    def start_cell(self) -> tuple[int, int]:
        row = self.start_row if self.start_row is not None else self.grid_height // 2
        col = self.start_col if self.start_col is not None else self.grid_width // 2
        return row, col

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their names/values)."""
        d = asdict(self)
        d["initial_direction"] = self.initial_direction.name
        d["termination_policy"] = self.termination_policy.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> SimulationConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        data = dict(raw)
        if "initial_direction" in data:
            name = data["initial_direction"]
            try:
                data["initial_direction"] = Direction[name]
            except KeyError:
                raise ValueError(f"Unknown direction: {name!r}") from None
        if "termination_policy" in data:
            data["termination_policy"] = TerminationPolicy(data["termination_policy"])
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
