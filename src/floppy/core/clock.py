"""
Frame timing and the frame driver.

The driver is independent of any scheduling primitive: it awaits a
``next_frame`` coroutine for each timestamp, so the same loop runs on
pygame frame pacing or on a scripted list of timestamps.
"""

import asyncio
import logging
import math
from typing import Awaitable, Callable, Iterable, Optional

logger = logging.getLogger(__name__)


def sanitize_delta(delta_ms: float, max_delta_ms: Optional[float] = None) -> float:
    """Clamp a frame delta to a usable value.

    Negative and non-finite deltas become zero-length ticks. Deltas above
    ``max_delta_ms`` are clamped to it.
    """
    if not math.isfinite(delta_ms) or delta_ms < 0:
        return 0.0
    if max_delta_ms is not None and delta_ms > max_delta_ms:
        return max_delta_ms
    return delta_ms


class FrameDriver:
    """
    Runs one simulation step followed by one render step per frame.

    Args:
        step: Called with the frame timestamp in milliseconds
        render: Called after each step, reads state only
        next_frame: Awaitable factory yielding the next timestamp
    """

    def __init__(
        self,
        step: Callable[[float], object],
        render: Callable[[], None],
        next_frame: Callable[[], Awaitable[float]],
    ) -> None:
        self._step = step
        self._render = render
        self._next_frame = next_frame
        self._running = False
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def is_running(self) -> bool:
        return self._running

    async def run(self, max_frames: Optional[int] = None) -> None:
        """Main frame loop. Runs until stopped or ``max_frames`` is reached."""
        self._running = True
        logger.info("Frame driver started")

        while self._running:
            if max_frames is not None and self._frame_count >= max_frames:
                break

            timestamp = await self._next_frame()
            if not self._running:
                break

            self._step(timestamp)
            self._render()
            self._frame_count += 1

        self._running = False
        logger.info(f"Frame driver stopped after {self._frame_count} frames")

    def stop(self) -> None:
        """Stop the loop after the current frame."""
        self._running = False


def scripted_frames(timestamps: Iterable[float]) -> Callable[[], Awaitable[float]]:
    """Build a ``next_frame`` source from a fixed sequence of timestamps."""
    iterator = iter(timestamps)

    async def next_frame() -> float:
        await asyncio.sleep(0)
        return next(iterator)

    return next_frame
