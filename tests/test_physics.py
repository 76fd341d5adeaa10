from __future__ import annotations

import pytest

from floppy.config.settings import PhysicsSettings, Settings
from floppy.game import physics


def test_new_avatar_starts_at_rest_in_vertical_center(settings: Settings) -> None:
    avatar = physics.new_avatar(settings.physics, settings.display.height)

    assert avatar.x == 100
    assert avatar.y == 300
    assert avatar.velocity == 0
    assert avatar.angle == 0


def test_impulse_replaces_velocity(settings: Settings) -> None:
    avatar = physics.new_avatar(settings.physics, 600)
    avatar.velocity = 7.0

    physics.apply_impulse(avatar, settings.physics)

    assert avatar.velocity == -9.5


def test_integrate_adds_gravity_then_moves(settings: Settings) -> None:
    avatar = physics.new_avatar(settings.physics, 600)

    physics.integrate(avatar, settings.physics, 16.6, 16.6)

    assert avatar.velocity == pytest.approx(0.55)
    assert avatar.y == pytest.approx(300.55)
    assert avatar.angle == pytest.approx(0.55 * 0.035)


def test_gravity_is_per_tick_regardless_of_delta(settings: Settings) -> None:
    slow = physics.new_avatar(settings.physics, 600)
    fast = physics.new_avatar(settings.physics, 600)

    physics.integrate(slow, settings.physics, 100.0, 16.6)
    physics.integrate(fast, settings.physics, 0.0, 16.6)

    assert slow == fast


def test_frame_compensated_gravity_scales_with_delta() -> None:
    compensated = PhysicsSettings(frame_compensated_gravity=True)
    avatar = physics.new_avatar(compensated, 600)

    physics.integrate(avatar, compensated, 33.2, 16.6)

    assert avatar.velocity == pytest.approx(1.1)
    assert avatar.y == pytest.approx(302.2)


@pytest.mark.parametrize(
    ("velocity", "expected"),
    [(0.0, 0.0), (10.0, 0.35), (100.0, 1.1), (-9.5, -0.3325), (-100.0, -0.5)],
)
def test_tilt_is_clamped(settings: Settings, velocity: float, expected: float) -> None:
    assert physics.tilt_for(velocity, settings.physics) == pytest.approx(expected)
