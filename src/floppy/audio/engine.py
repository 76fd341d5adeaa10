"""
Floppy Audio Engine - synthesized arcade sound effects.

Three effects: flap, hit, point. Retriggering an effect restarts it
instead of layering another copy.
"""

import pygame
import array
import math
import random
import logging
from typing import Callable, Dict, Optional

from floppy.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def noise() -> float:
    """White noise generator."""
    return random.random() * 2 - 1


class AudioEngine:
    """
    Plays the game's sound effects through pygame.mixer.

    Initialization failures (no audio device) are logged and leave the
    engine silent; the game keeps running.
    """

    SOUNDS = ("flap", "hit", "point")

    def __init__(self, volume: float = 1.0) -> None:
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._volume = volume
        self._muted = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and generate all effects."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
            self._initialized = True
            logger.info("Audio engine initialized")

            self._generate_all_sounds()
            return True
        except Exception as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

    def bind(self, event_bus: EventBus) -> None:
        """Play sounds requested on the event bus."""
        self._unsubscribe = event_bus.subscribe(EventType.SOUND_PLAY, self._on_sound_event)

    def _on_sound_event(self, event: Event) -> None:
        name = event.data.get("sound")
        if name:
            self.play(name)

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _generate_all_sounds(self) -> None:
        logger.info("Generating sound effects...")
        self._gen_flap()
        self._gen_hit()
        self._gen_point()
        logger.info(f"Generated {len(self._sounds)} sounds")

    def _gen_flap(self) -> None:
        """Short upward chirp."""
        samples = array.array('h')
        duration = 0.09
        for i in range(int(SAMPLE_RATE * duration)):
            t = i / SAMPLE_RATE
            env = max(0, 1 - t / duration)
            freq = 320 + 900 * (t / duration)
            val = square(t, freq) * 0.35 + sine(t, freq / 2) * 0.25
            samples.append(int(val * env * 32767 * 0.5))
        self._sounds["flap"] = self._create_sound(samples)

    def _gen_hit(self) -> None:
        """Crunch: noise burst over a falling low tone."""
        samples = array.array('h')
        duration = 0.3
        for i in range(int(SAMPLE_RATE * duration)):
            t = i / SAMPLE_RATE
            env = max(0, 1 - t / duration) ** 2
            freq = 180 - 120 * (t / duration)
            val = noise() * 0.5 + square(t, freq) * 0.4
            samples.append(int(val * env * 32767 * 0.6))
        self._sounds["hit"] = self._create_sound(samples)

    def _gen_point(self) -> None:
        """Two-tone ding."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.18)):
            t = i / SAMPLE_RATE
            if t < 0.07:
                freq = 988
                env = 1.0
            else:
                freq = 1319
                env = max(0, 1 - (t - 0.07) * 9)
            val = square(t, freq) * 0.3 + sine(t, freq) * 0.3
            samples.append(int(val * env * 32767 * 0.5))
        self._sounds["point"] = self._create_sound(samples)

    def play(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect from the start, cutting off a running copy."""
        if not self._initialized or self._muted:
            return None

        sound = self._sounds.get(sound_name)
        if not sound:
            logger.warning(f"Sound not found: {sound_name}")
            return None

        sound.stop()
        sound.set_volume(self._volume)
        return sound.play()

    def toggle_mute(self) -> bool:
        """Toggle mute. Returns the new muted state."""
        self._muted = not self._muted
        logger.info(f"Audio {'muted' if self._muted else 'unmuted'}")
        return self._muted

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")
