"""Paints a game state into an RGB buffer. Never mutates the state."""

from typing import Optional

from floppy.config.settings import Settings
from floppy.game.entities import Avatar, GameState, Obstacle
from floppy.graphics.primitives import (
    Buffer,
    draw_circle,
    draw_polygon,
    draw_rect,
    fill,
    new_buffer,
    rotate,
)

SKY_COLOR = (112, 197, 206)
GROUND_COLOR = (90, 160, 255)
PIPE_COLOR = (45, 122, 61)
PIPE_CAP_COLOR = (20, 77, 32)
BIRD_COLOR = (255, 210, 77)
EYE_COLOR = (0, 0, 0)
BEAK_COLOR = (255, 107, 47)

PIPE_CAP_HEIGHT = 6


def render_frame(
    state: GameState,
    settings: Settings,
    buffer: Optional[Buffer] = None,
) -> Buffer:
    """Render the playfield: sky, ground band, obstacles, avatar."""
    display = settings.display
    if buffer is None:
        buffer = new_buffer(display.width, display.height)

    fill(buffer, SKY_COLOR)

    ground_top = display.height - display.ground_height
    draw_rect(buffer, 0, ground_top, display.width, display.ground_height, GROUND_COLOR)

    for obstacle in state.obstacles:
        _draw_obstacle(buffer, obstacle, settings)

    _draw_avatar(buffer, state.avatar, settings)
    return buffer


def _draw_obstacle(buffer: Buffer, obstacle: Obstacle, settings: Settings) -> None:
    width = settings.obstacles.width
    ground_top = settings.display.height - settings.display.ground_height
    top = obstacle.gap_center - settings.gap_half
    bottom = obstacle.gap_center + settings.gap_half

    draw_rect(buffer, obstacle.x, 0, width, top, PIPE_COLOR)
    draw_rect(buffer, obstacle.x, bottom, width, ground_top - bottom, PIPE_COLOR)

    # Caps at the gap edges
    draw_rect(buffer, obstacle.x, top - PIPE_CAP_HEIGHT, width, PIPE_CAP_HEIGHT, PIPE_CAP_COLOR)
    draw_rect(buffer, obstacle.x, bottom, width, PIPE_CAP_HEIGHT, PIPE_CAP_COLOR)


def _draw_avatar(buffer: Buffer, avatar: Avatar, settings: Settings) -> None:
    r = settings.physics.radius
    center = (avatar.x, avatar.y)

    draw_circle(buffer, avatar.x, avatar.y, r, BIRD_COLOR)

    eye_x, eye_y = rotate((6, -4), avatar.angle, center)
    draw_circle(buffer, eye_x, eye_y, 3, EYE_COLOR)

    beak = [(-r / 2, 2), (r, 0), (-r / 2, 10)]
    draw_polygon(buffer, [rotate(p, avatar.angle, center) for p in beak], BEAK_COLOR)
