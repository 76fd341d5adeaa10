"""
Score display and message overlay.

Both are text sinks: they only change when the game publishes a score
or phase change on the event bus.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from floppy.core.events import Event, EventBus, EventType
from floppy.core.state import Phase

logger = logging.getLogger(__name__)

READY_MESSAGE = ["Click or press Space to start"]
GAME_OVER_MESSAGE = ["Game Over", "Press R to restart"]


def format_score(score: int, best: int, phase: Phase) -> str:
    """Score text: plain while playing, with the best score once over."""
    if phase == Phase.OVER:
        return f"{score}  (best: {best})"
    return f"{score}"


def message_for(phase: Phase) -> Optional[List[str]]:
    """Overlay lines for a phase, or None when the overlay is hidden."""
    if phase == Phase.READY:
        return list(READY_MESSAGE)
    if phase == Phase.OVER:
        return list(GAME_OVER_MESSAGE)
    return None


@dataclass
class Hud:
    """Current text of the score display and message overlay."""

    score_text: str = "0"
    message: Optional[List[str]] = field(default_factory=lambda: list(READY_MESSAGE))
    _unsubscribers: List[Callable[[], None]] = field(default_factory=list, repr=False)

    @property
    def message_visible(self) -> bool:
        return self.message is not None

    def bind(self, event_bus: EventBus) -> None:
        """Follow score and phase events from the game."""
        self._unsubscribers.append(
            event_bus.subscribe(EventType.SCORE_CHANGED, self._on_score_changed)
        )
        self._unsubscribers.append(
            event_bus.subscribe(EventType.PHASE_CHANGED, self._on_phase_changed)
        )

    def unbind(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_score_changed(self, event: Event) -> None:
        self.score_text = format_score(
            event.data["score"], event.data["best"], event.data["phase"]
        )

    def _on_phase_changed(self, event: Event) -> None:
        phase = event.data["new"]
        self.message = message_for(phase)
        self.score_text = format_score(event.data["score"], event.data["best"], phase)
        logger.debug(f"HUD updated for {phase.name}")
