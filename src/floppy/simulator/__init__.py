"""Desktop window hosting the game."""

from .window import GameWindow, WindowConfig, map_event

__all__ = ["GameWindow", "WindowConfig", "map_event"]
