"""Basic drawing primitives on RGB numpy buffers."""

import math
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Create a black (height, width, 3) buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
) -> None:
    """Draw a filled rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))

    buffer[y1:y2, x1:x2] = color


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
) -> None:
    """Draw a filled circle using a distance mask."""
    h, w = buffer.shape[:2]
    y_indices, x_indices = np.ogrid[:h, :w]
    dist_sq = (x_indices + 0.5 - cx) ** 2 + (y_indices + 0.5 - cy) ** 2
    mask = dist_sq <= radius ** 2
    buffer[mask] = color


def draw_polygon(buffer: Buffer, points: Sequence[Point], color: Color) -> None:
    """Draw a filled convex polygon.

    A pixel is inside when its center lies on the same side of every edge.
    """
    if len(points) < 3:
        return

    h, w = buffer.shape[:2]
    y_indices, x_indices = np.ogrid[:h, :w]
    px = x_indices + 0.5
    py = y_indices + 0.5

    inside_pos = np.ones((h, w), dtype=bool)
    inside_neg = np.ones((h, w), dtype=bool)
    for i, (x0, y0) in enumerate(points):
        x1, y1 = points[(i + 1) % len(points)]
        cross = (x1 - x0) * (py - y0) - (y1 - y0) * (px - x0)
        inside_pos &= cross >= 0
        inside_neg &= cross <= 0

    buffer[inside_pos | inside_neg] = color


def rotate(point: Point, angle: float, origin: Point = (0.0, 0.0)) -> Point:
    """Rotate a point around an origin (y axis pointing down)."""
    x, y = point
    ox, oy = origin
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        ox + x * cos_a - y * sin_a,
        oy + x * sin_a + y * cos_a,
    )
