"""Core framework components for Floppy."""

from .state import Phase, StateMachine
from .events import EventBus, Event, EventType
from .clock import FrameDriver, sanitize_delta

__all__ = [
    "Phase",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "FrameDriver",
    "sanitize_delta",
]
