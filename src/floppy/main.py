"""
Main entry point for Floppy.

Wires settings, the game controller, audio and the HUD into the
pygame window and runs it.
"""

import asyncio
import logging
import sys

from floppy.config.settings import Settings, get_settings
from floppy.core.events import EventBus
from floppy.game.controller import GameController
from floppy.graphics.hud import Hud


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_game(settings: Settings) -> None:
    """Run the game in a desktop window."""
    from floppy.audio.engine import AudioEngine
    from floppy.simulator.window import GameWindow

    logger = logging.getLogger(__name__)

    # Create shared components
    event_bus = EventBus()
    controller = GameController(settings, event_bus=event_bus)

    hud = Hud()
    hud.bind(event_bus)

    audio = None
    if settings.audio.enabled:
        audio = AudioEngine(volume=settings.audio.volume)
        if audio.init():
            audio.bind(event_bus)
        else:
            logger.warning("Audio unavailable, running silently")

    window = GameWindow(settings, controller, hud, audio=audio)
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Floppy starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Floppy stopped")


if __name__ == "__main__":
    main()
