"""
Game window using pygame.

Hosts the frame driver, normalizes keyboard, mouse and touch input into
game signals, and shows the rendered playfield with the HUD on top.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..config.settings import Settings
from ..core.clock import FrameDriver
from ..game.controller import GameController
from ..game.entities import InputSignal
from ..graphics.hud import Hud
from ..graphics.primitives import new_buffer
from ..graphics.renderer import render_frame
from ..audio.engine import AudioEngine

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Window configuration."""
    title: str = "Floppy Bird"
    fps: int = 60
    scale: int = 1

    # Colors
    text_color: tuple[int, int, int] = (255, 255, 255)
    shadow_color: tuple[int, int, int] = (20, 20, 30)
    overlay_color: tuple[int, int, int, int] = (0, 0, 0, 110)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        return cls(
            title=settings.display.title,
            fps=settings.display.fps,
            scale=settings.display.scale,
        )


def map_event(event: pygame.event.Event) -> Optional[InputSignal]:
    """Translate a pygame event into a game signal, if it is one."""
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            return InputSignal.ACTIVATE
        if event.key == pygame.K_r:
            return InputSignal.RESTART
    elif event.type == pygame.MOUSEBUTTONDOWN:
        # Touches also arrive as emulated mouse presses
        if event.button == 1 and not getattr(event, "touch", False):
            return InputSignal.ACTIVATE
    elif event.type == pygame.FINGERDOWN:
        return InputSignal.ACTIVATE
    return None


class GameWindow:
    """
    Main game window.

    Keyboard Mapping:
        SPACE: Flap (also left click / touch)
        R: Restart after game over
        M: Toggle sound
        ESC / Q: Exit
    """

    def __init__(
        self,
        settings: Settings,
        controller: GameController,
        hud: Hud,
        audio: Optional[AudioEngine] = None,
        config: Optional[WindowConfig] = None,
    ) -> None:
        self.settings = settings
        self.controller = controller
        self.hud = hud
        self.audio = audio
        self.config = config or WindowConfig.from_settings(settings)

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

        self._buffer = new_buffer(settings.display.width, settings.display.height)
        self._driver = FrameDriver(
            step=self.controller.step,
            render=self._render,
            next_frame=self._next_frame,
        )

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (
            self.settings.display.width * self.config.scale,
            self.settings.display.height * self.config.scale,
        )
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 36 * self.config.scale)
        self._small_font = pygame.font.SysFont(None, 24 * self.config.scale)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events. Game input is queued for the next step."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
                continue

            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.stop()
                    continue
                if event.key == pygame.K_m and self.audio:
                    self.audio.toggle_mute()
                    continue

            signal = map_event(event)
            if signal is not None:
                self.controller.queue_input(signal)

    async def _next_frame(self) -> float:
        """Pace to the target fps, gather input, and return the frame time."""
        if self._clock:
            self._clock.tick(self.config.fps)

        # Yield to other tasks
        await asyncio.sleep(0)

        self._handle_events()
        return float(pygame.time.get_ticks())

    def _render(self) -> None:
        """Render the playfield and HUD."""
        if not self._screen:
            return

        render_frame(self.controller.state, self.settings, self._buffer)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        self._render_score()
        if self.hud.message_visible:
            self._render_message()

        pygame.display.flip()

    def _render_score(self) -> None:
        width = self._screen.get_width()
        self._blit_text(self._font, self.hud.score_text, width // 2, 30 * self.config.scale)

    def _render_message(self) -> None:
        lines = self.hud.message or []
        width, height = self._screen.get_size()

        line_height = self._small_font.get_linesize() + 4
        box_h = line_height * len(lines) + 24 * self.config.scale
        overlay = pygame.Surface((width, box_h), pygame.SRCALPHA)
        overlay.fill(self.config.overlay_color)
        top = (height - box_h) // 2
        self._screen.blit(overlay, (0, top))

        y = top + 12 * self.config.scale + line_height // 2
        for i, line in enumerate(lines):
            font = self._font if i == 0 and len(lines) > 1 else self._small_font
            self._blit_text(font, line, width // 2, y)
            y += line_height

    def _blit_text(self, font: pygame.font.Font, text: str, cx: int, cy: int) -> None:
        """Draw centered text with a drop shadow."""
        shadow = font.render(text, True, self.config.shadow_color)
        label = font.render(text, True, self.config.text_color)
        rect = label.get_rect(center=(cx, cy))
        self._screen.blit(shadow, rect.move(2, 2))
        self._screen.blit(label, rect)

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        logger.info("Game window started")

        try:
            await self._driver.run()
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up audio, then pygame."""
        if self.audio:
            self.audio.cleanup()
        pygame.quit()
        logger.info("Game window stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._driver.stop()
