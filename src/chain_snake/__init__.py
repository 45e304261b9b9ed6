"""Chain Snake: tick-driven grid snake simulation core."""

from chain_snake.chain import BodyChain, SegmentArena
from chain_snake.clock import TickGate
from chain_snake.collision import Collision, detect_collision
from chain_snake.config import SimulationConfig, TerminationPolicy
from chain_snake.direction import Direction, DirectionResolver
from chain_snake.food import FoodPlacer
from chain_snake.grid import CellType, Grid
from chain_snake.growth import PendingGrowth
from chain_snake.simulation import (
    EventKind,
    Simulation,
    SimulationStatus,
    TickEvent,
)

__all__ = [
    "BodyChain",
    "CellType",
    "Collision",
    "Direction",
    "DirectionResolver",
    "EventKind",
    "FoodPlacer",
    "Grid",
    "PendingGrowth",
    "SegmentArena",
    "Simulation",
    "SimulationConfig",
    "SimulationStatus",
    "TerminationPolicy",
    "TickEvent",
    "TickGate",
    "detect_collision",
]
