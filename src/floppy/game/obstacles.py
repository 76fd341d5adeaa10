"""Obstacle spawning, scrolling and pruning."""

import logging
import random
from typing import Optional

from floppy.config.settings import Settings
from floppy.game.entities import GameState, Obstacle

logger = logging.getLogger(__name__)


class ObstacleManager:
    """
    Owns the obstacle lifecycle of a session.

    Obstacles enter at the right edge on a timer, scroll left at a
    frame-rate independent speed, and are dropped once fully off screen.
    Spawn order is left-to-right, so the list stays sorted by ``x``.
    """

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        self.rng = rng or random.Random()

    def spawn(self, state: GameState) -> Obstacle:
        """Append a new obstacle at the right edge with a random gap."""
        low, high = self.settings.spawn_band
        center = self.rng.random() * (high - low) + low

        obstacle = Obstacle(
            x=self.settings.display.width + self.settings.obstacles.spawn_offset,
            gap_center=center,
        )
        state.obstacles.append(obstacle)
        logger.debug(f"Spawned obstacle with gap at {center:.1f}")
        return obstacle

    def maybe_spawn(self, state: GameState, now: float) -> Optional[Obstacle]:
        """Spawn when the spawn interval has elapsed since the last spawn."""
        if now - state.last_spawn_time > self.settings.obstacles.spawn_interval_ms:
            state.last_spawn_time = now
            return self.spawn(state)
        return None

    def advance(self, state: GameState, delta_ms: float) -> None:
        """Scroll every obstacle left, then prune the ones off screen."""
        shift = self.settings.obstacles.speed * (
            delta_ms / self.settings.timing.reference_frame_ms
        )
        for obstacle in state.obstacles:
            obstacle.x -= shift

        width = self.settings.obstacles.width
        state.obstacles = [o for o in state.obstacles if o.x > -width]
