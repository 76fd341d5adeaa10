from __future__ import annotations

import os
import random

import pytest

from floppy.config.settings import Settings
from floppy.core.events import EventBus, EventType
from floppy.game.controller import GameController

FRAME_MS = 16.6


class FixedRandom(random.Random):
    """Random source that always returns the same draw."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for key in list(os.environ):
        if key.startswith("FLOPPY_"):
            monkeypatch.delenv(key)
    return Settings(_env_file=None)


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def controller(settings: Settings, event_bus: EventBus) -> GameController:
    return GameController(settings, event_bus=event_bus, rng=FixedRandom(0.5))


def sounds(event_bus: EventBus) -> list[str]:
    return [e.data["sound"] for e in event_bus.get_history(EventType.SOUND_PLAY, limit=100)]


class Frames:
    """Monotonic frame timestamps at the reference frame rate."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def next(self) -> float:
        self.now += FRAME_MS
        return self.now
