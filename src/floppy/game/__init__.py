"""Simulation: avatar physics, obstacles, collisions and the controller."""

from floppy.game.entities import Avatar, Obstacle, GameState, InputSignal
from floppy.game.controller import GameController

__all__ = ["Avatar", "Obstacle", "GameState", "InputSignal", "GameController"]
