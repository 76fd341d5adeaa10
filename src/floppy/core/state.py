"""
Phase state machine for a Floppy session.

Phases:
    READY: Avatar idle, waiting for the first flap
    RUNNING: Physics, obstacles and collisions active
    OVER: Terminal until an explicit restart
"""

from enum import Enum, auto
from typing import Callable, Protocol
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Session phases."""
    READY = auto()
    RUNNING = auto()
    OVER = auto()


class HasPhase(Protocol):
    phase: Phase


PhaseListener = Callable[[Phase, Phase], None]


class StateMachine:
    """
    Guards phase transitions of a session.

    The phase itself is stored on the session object so that the whole
    session stays one explicit state value; the machine only validates
    transitions and notifies listeners of changes.
    """

    # Valid phase transitions
    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        (Phase.READY, Phase.RUNNING),   # First flap
        (Phase.RUNNING, Phase.OVER),    # Collision
        (Phase.OVER, Phase.READY),      # Restart
    ]

    def __init__(self, session: HasPhase) -> None:
        self._session = session
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with phase: {session.phase.name}")

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._session.phase

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._session.phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._session.phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._session.phase
        self._session.phase = to_phase

        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
