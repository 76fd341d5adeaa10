"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. FLOPPY_PHYSICS__GRAVITY=0.4.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Playfield and window settings."""

    # Logical playfield
    width: int = Field(default=400, gt=0)
    height: int = Field(default=600, gt=0)
    ground_height: int = Field(default=48, ge=0)

    # Window
    scale: int = Field(default=1, ge=1)
    fps: int = Field(default=60, gt=0)
    title: str = "Floppy Bird"


class PhysicsSettings(BaseModel):
    """Avatar physics constants (pixels per tick)."""

    avatar_x: float = 100.0
    radius: float = Field(default=16.0, gt=0)
    gravity: float = 0.55
    flap_velocity: float = -9.5

    # Visual tilt
    tilt_factor: float = 0.035
    tilt_min: float = -0.5
    tilt_max: float = 1.1

    # Scale gravity and displacement by frame time instead of per tick
    frame_compensated_gravity: bool = False


class ObstacleSettings(BaseModel):
    """Pipe geometry and spawning."""

    width: float = Field(default=55.0, gt=0)
    gap: float = Field(default=150.0, gt=0)
    speed: float = 2.2  # pixels per reference frame
    spawn_interval_ms: float = Field(default=1400.0, gt=0)
    spawn_margin: float = Field(default=60.0, ge=0)
    spawn_offset: float = 20.0


class TimingSettings(BaseModel):
    """Frame timing."""

    reference_frame_ms: float = Field(default=16.6, gt=0)
    max_delta_ms: float = Field(default=250.0, gt=0)


class AudioSettings(BaseModel):
    """Sound effect settings."""

    enabled: bool = True
    volume: float = Field(default=0.8, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLOPPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    obstacles: ObstacleSettings = Field(default_factory=ObstacleSettings)
    timing: TimingSettings = Field(default_factory=TimingSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @model_validator(mode="after")
    def _check_spawn_band(self) -> "Settings":
        room = self.display.height - 2 * self.obstacles.spawn_margin
        if room < self.obstacles.gap:
            raise ValueError(
                f"playfield height {self.display.height} cannot fit a gap of "
                f"{self.obstacles.gap} with {self.obstacles.spawn_margin} margins"
            )
        return self

    @property
    def gap_half(self) -> float:
        """Half of the passable gap height."""
        return self.obstacles.gap / 2

    @property
    def spawn_band(self) -> tuple[float, float]:
        """Range of valid gap centers for a new obstacle."""
        low = self.obstacles.spawn_margin + self.gap_half
        high = self.display.height - self.obstacles.spawn_margin - self.gap_half
        return low, high


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
