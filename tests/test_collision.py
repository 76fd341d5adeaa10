from __future__ import annotations

import itertools

import pytest

from floppy.config.settings import Settings
from floppy.game.collision import (
    collect_points,
    detect_collision,
    hits_boundary,
    hits_obstacle,
)
from floppy.game.entities import Avatar, GameState, Obstacle


def test_points_awarded_once_trailing_edge_passes_leading_edge(settings: Settings) -> None:
    passed = Obstacle(x=28.9, gap_center=300)
    touching = Obstacle(x=29.0, gap_center=300)
    state = GameState(avatar=Avatar(x=100, y=300), obstacles=[passed, touching])

    scored = collect_points(state, settings)

    assert scored == [passed]
    assert passed.scored is True
    assert touching.scored is False
    assert state.score == 1

    # Already scored obstacles never count again
    assert collect_points(state, settings) == []
    assert state.score == 1
    assert passed.scored is True


def test_points_for_several_obstacles_in_one_tick(settings: Settings) -> None:
    state = GameState(
        avatar=Avatar(x=100, y=300),
        obstacles=[Obstacle(x=-10, gap_center=300), Obstacle(x=0, gap_center=200)],
        score=4,
    )

    collect_points(state, settings)

    assert state.score == 6


def test_avatar_inside_gap_survives(settings: Settings) -> None:
    avatar = Avatar(x=100, y=300)
    assert hits_obstacle(avatar, Obstacle(x=100, gap_center=300), settings) is False


@pytest.mark.parametrize("y", [230.0, 370.0])
def test_avatar_clipping_gap_edge_collides(settings: Settings, y: float) -> None:
    avatar = Avatar(x=100, y=y)
    assert hits_obstacle(avatar, Obstacle(x=100, gap_center=300), settings) is True


@pytest.mark.parametrize("x", [116.0, 200.0, 29.0, -10.0])
def test_no_collision_without_horizontal_overlap(settings: Settings, x: float) -> None:
    avatar = Avatar(x=100, y=100)
    assert hits_obstacle(avatar, Obstacle(x=x, gap_center=450), settings) is False


@pytest.mark.parametrize(
    ("y", "expected"),
    [(15.9, True), (16.0, False), (300.0, False), (584.0, False), (584.1, True)],
)
def test_boundaries(settings: Settings, y: float, expected: bool) -> None:
    assert hits_boundary(Avatar(x=100, y=y), settings) is expected


def test_boundary_hit_without_obstacles(settings: Settings) -> None:
    assert detect_collision(Avatar(x=100, y=-5), [], settings) is True
    assert detect_collision(Avatar(x=100, y=300), [], settings) is False


def test_collision_outcome_independent_of_order(settings: Settings) -> None:
    avatar = Avatar(x=100, y=200)
    obstacles = [
        Obstacle(x=300, gap_center=450),   # no overlap
        Obstacle(x=90, gap_center=300),    # overlap, avatar above gap
        Obstacle(x=110, gap_center=200),   # overlap, avatar inside gap
        Obstacle(x=-40, gap_center=150),   # behind
    ]

    outcomes = {
        detect_collision(avatar, list(order), settings)
        for order in itertools.permutations(obstacles)
    }

    assert outcomes == {True}
