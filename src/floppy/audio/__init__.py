"""
Floppy Audio System - synthesized sound effects.
"""

from .engine import AudioEngine

__all__ = ["AudioEngine"]
