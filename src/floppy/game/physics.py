"""Avatar physics: gravity, flaps and tilt."""

from floppy.config.settings import PhysicsSettings
from floppy.game.entities import Avatar


def new_avatar(physics: PhysicsSettings, playfield_height: float) -> Avatar:
    """Create an avatar at rest in the vertical center."""
    return Avatar(x=physics.avatar_x, y=playfield_height / 2)


def apply_impulse(avatar: Avatar, physics: PhysicsSettings) -> None:
    """Replace the vertical velocity with the flap velocity."""
    avatar.velocity = physics.flap_velocity


def integrate(
    avatar: Avatar,
    physics: PhysicsSettings,
    delta_ms: float,
    reference_frame_ms: float,
) -> None:
    """Advance the avatar by one tick.

    Gravity is a flat per-tick increment and the displacement is the
    per-tick velocity, so ``delta_ms`` is ignored unless
    ``frame_compensated_gravity`` is enabled.
    """
    if physics.frame_compensated_gravity:
        scale = delta_ms / reference_frame_ms
        avatar.velocity += physics.gravity * scale
        avatar.y += avatar.velocity * scale
    else:
        avatar.velocity += physics.gravity
        avatar.y += avatar.velocity

    avatar.angle = tilt_for(avatar.velocity, physics)


def tilt_for(velocity: float, physics: PhysicsSettings) -> float:
    """Nose angle in radians for a vertical velocity."""
    return max(physics.tilt_min, min(physics.tilt_max, velocity * physics.tilt_factor))
