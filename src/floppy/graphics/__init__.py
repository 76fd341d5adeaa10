"""Graphics module for Floppy rendering."""

from floppy.graphics.renderer import render_frame
from floppy.graphics.hud import Hud, format_score, message_for
from floppy.graphics.primitives import (
    draw_rect,
    draw_circle,
    draw_polygon,
    fill,
    new_buffer,
)

__all__ = [
    "render_frame",
    "Hud",
    "format_score",
    "message_for",
    "draw_rect",
    "draw_circle",
    "draw_polygon",
    "fill",
    "new_buffer",
]
