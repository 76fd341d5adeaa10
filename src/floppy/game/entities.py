"""Simulation entities and the session state."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from floppy.core.state import Phase


class InputSignal(Enum):
    """Normalized player input."""
    ACTIVATE = auto()
    RESTART = auto()


@dataclass
class Avatar:
    """The bird. ``x`` is fixed; the world scrolls past it."""

    x: float
    y: float
    velocity: float = 0.0
    angle: float = 0.0


@dataclass
class Obstacle:
    """A pipe pair with a passable gap centered at ``gap_center``."""

    x: float
    gap_center: float
    scored: bool = False


@dataclass
class GameState:
    """Everything one session needs, passed to and returned from each tick."""

    avatar: Avatar
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    phase: Phase = Phase.READY
    last_spawn_time: float = 0.0
    last_frame_time: Optional[float] = None
