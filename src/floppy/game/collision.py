"""Scoring and collision checks for one tick."""

from typing import Iterable, List

from floppy.config.settings import Settings
from floppy.game.entities import Avatar, GameState, Obstacle


def collect_points(state: GameState, settings: Settings) -> List[Obstacle]:
    """Score every obstacle whose trailing edge passed the avatar's leading edge.

    Marks each newly passed obstacle as scored, adds one point per
    obstacle and returns the obstacles scored this tick.
    """
    avatar = state.avatar
    leading_edge = avatar.x - settings.physics.radius
    width = settings.obstacles.width

    passed = []
    for obstacle in state.obstacles:
        if not obstacle.scored and obstacle.x + width < leading_edge:
            obstacle.scored = True
            passed.append(obstacle)

    state.score += len(passed)
    return passed


def overlaps_horizontally(avatar: Avatar, obstacle: Obstacle, settings: Settings) -> bool:
    r = settings.physics.radius
    return (
        avatar.x + r > obstacle.x
        and avatar.x - r < obstacle.x + settings.obstacles.width
    )


def hits_obstacle(avatar: Avatar, obstacle: Obstacle, settings: Settings) -> bool:
    """True when the avatar overlaps the pipe and is not fully inside its gap."""
    if not overlaps_horizontally(avatar, obstacle, settings):
        return False

    r = settings.physics.radius
    gap_top = obstacle.gap_center - settings.gap_half
    gap_bottom = obstacle.gap_center + settings.gap_half
    return avatar.y - r < gap_top or avatar.y + r > gap_bottom


def hits_boundary(avatar: Avatar, settings: Settings) -> bool:
    r = settings.physics.radius
    return avatar.y - r < 0 or avatar.y + r > settings.display.height


def detect_collision(
    avatar: Avatar,
    obstacles: Iterable[Obstacle],
    settings: Settings,
) -> bool:
    """Any obstacle or boundary hit. The result does not depend on order."""
    if hits_boundary(avatar, settings):
        return True
    return any(hits_obstacle(avatar, o, settings) for o in obstacles)
