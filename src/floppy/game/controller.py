"""Game controller: phases, input, and the per-frame simulation step."""

import logging
import math
import random
from typing import List, Optional

from floppy.config.settings import Settings
from floppy.core.clock import sanitize_delta
from floppy.core.events import Event, EventBus, EventType, sound_event, tick_event
from floppy.core.state import Phase, StateMachine
from floppy.game import physics
from floppy.game.collision import collect_points, detect_collision
from floppy.game.entities import GameState, InputSignal
from floppy.game.obstacles import ObstacleManager

logger = logging.getLogger(__name__)


class GameController:
    """
    Runs a Floppy session.

    Lifecycle:
        READY: avatar idle until the first flap
        RUNNING: gravity, obstacles, scoring and collisions each step
        OVER: frozen until restart()

    Sounds (``flap``, ``hit``, ``point``) and HUD updates are published
    on the event bus; the controller never waits for them.
    """

    def __init__(
        self,
        settings: Settings,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.event_bus = event_bus or EventBus()
        self.obstacles = ObstacleManager(settings, rng)

        self.state = GameState(
            avatar=physics.new_avatar(settings.physics, settings.display.height)
        )
        self.state_machine = StateMachine(self.state)
        self.state_machine.add_listener(self._on_phase_changed)

        self._pending: List[InputSignal] = []
        self._frame = 0

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # Input
    def queue_input(self, signal: InputSignal) -> None:
        """Record input that arrived between frames; applied by the next step."""
        self._pending.append(signal)

    def _handle_input(self, signal: InputSignal) -> bool:
        """Apply an input signal now. Returns True if it had an effect."""
        if signal is InputSignal.ACTIVATE:
            return self.activate()
        if signal is InputSignal.RESTART:
            return self.restart()
        return False

    def activate(self) -> bool:
        """Flap. Starts the run from READY; ignored once the game is over."""
        if self.phase == Phase.OVER:
            return False

        physics.apply_impulse(self.state.avatar, self.settings.physics)
        self._play("flap")

        if self.phase == Phase.READY:
            self.state_machine.transition(Phase.RUNNING)
        return True

    def restart(self) -> bool:
        """Back to READY with a fresh avatar. Only honoured while OVER."""
        if self.phase != Phase.OVER:
            return False

        state = self.state
        state.avatar = physics.new_avatar(self.settings.physics, self.settings.display.height)
        state.obstacles = []
        state.score = 0
        state.last_spawn_time = state.last_frame_time or 0.0

        logger.info(f"Restarting session (best: {state.best_score})")
        self.state_machine.transition(Phase.READY)
        self._publish_score()
        return True

    # Simulation
    def step(self, timestamp: float) -> GameState:
        """Run one frame: pending input, then physics, obstacles, collisions."""
        delta_ms = self._advance_clock(timestamp)

        pending, self._pending = self._pending, []
        for signal in pending:
            self._handle_input(signal)

        now = self.state.last_frame_time
        if self.phase == Phase.RUNNING and now is not None:
            self._update(delta_ms, now)

        self._frame += 1
        self.event_bus.emit(tick_event(delta_ms, self._frame))
        return self.state

    def _advance_clock(self, timestamp: float) -> float:
        state = self.state
        if not math.isfinite(timestamp):
            return 0.0
        if state.last_frame_time is None:
            # First frame: the spawn timer starts now
            state.last_frame_time = timestamp
            state.last_spawn_time = timestamp
            return 0.0

        elapsed = timestamp - state.last_frame_time
        if elapsed < 0:
            # Clock went backwards: re-anchor and keep the spawn countdown
            logger.warning(f"Frame clock went back {-elapsed:.1f}ms, re-anchoring")
            state.last_spawn_time += elapsed
            state.last_frame_time = timestamp
            return 0.0

        delta_ms = sanitize_delta(elapsed, self.settings.timing.max_delta_ms)
        if delta_ms > 0:
            state.last_frame_time = timestamp
        return delta_ms

    def _update(self, delta_ms: float, now: float) -> None:
        state = self.state
        physics.integrate(
            state.avatar,
            self.settings.physics,
            delta_ms,
            self.settings.timing.reference_frame_ms,
        )

        self.obstacles.maybe_spawn(state, now)
        self.obstacles.advance(state, delta_ms)

        passed = collect_points(state, self.settings)
        for _ in passed:
            self._play("point")
        if passed:
            logger.debug(f"Score: {state.score}")
            self._publish_score()

        if detect_collision(state.avatar, state.obstacles, self.settings):
            self._game_over()

    def _game_over(self) -> None:
        if self.phase != Phase.RUNNING:
            return

        state = self.state
        state.best_score = max(state.best_score, state.score)
        self.state_machine.transition(Phase.OVER)
        self._play("hit")
        self._publish_score()
        logger.info(f"Game over: score {state.score}, best {state.best_score}")

    # Notifications
    def _play(self, name: str) -> None:
        self.event_bus.emit(sound_event(name))

    def _publish_score(self) -> None:
        self.event_bus.emit(Event(
            EventType.SCORE_CHANGED,
            data={
                "score": self.state.score,
                "best": self.state.best_score,
                "phase": self.phase,
            },
            source="game",
        ))

    def _on_phase_changed(self, old_phase: Phase, new_phase: Phase) -> None:
        self.event_bus.emit(Event(
            EventType.PHASE_CHANGED,
            data={
                "old": old_phase,
                "new": new_phase,
                "score": self.state.score,
                "best": self.state.best_score,
            },
            source="game",
        ))
