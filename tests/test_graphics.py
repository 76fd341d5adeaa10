from __future__ import annotations

import copy

import numpy as np

from floppy.config.settings import Settings
from floppy.core.events import EventBus
from floppy.core.state import Phase
from floppy.game.controller import GameController
from floppy.game.entities import Avatar, GameState, Obstacle
from floppy.graphics.hud import GAME_OVER_MESSAGE, READY_MESSAGE, Hud, format_score, message_for
from floppy.graphics.primitives import draw_polygon, new_buffer, rotate
from floppy.graphics.renderer import (
    BIRD_COLOR,
    GROUND_COLOR,
    PIPE_CAP_COLOR,
    PIPE_COLOR,
    SKY_COLOR,
    render_frame,
)


def _pixel(buffer: np.ndarray, x: int, y: int) -> tuple[int, ...]:
    return tuple(int(c) for c in buffer[y, x])


def test_render_paints_ground_obstacles_and_avatar(settings: Settings) -> None:
    state = GameState(
        avatar=Avatar(x=100, y=300),
        obstacles=[Obstacle(x=200, gap_center=300)],
    )

    buffer = render_frame(state, settings)

    assert buffer.shape == (600, 400, 3)
    assert buffer.dtype == np.uint8
    assert _pixel(buffer, 10, 590) == GROUND_COLOR
    assert _pixel(buffer, 10, 10) == SKY_COLOR

    # Top barrier, cap, gap, bottom cap, bottom barrier, ground below it
    assert _pixel(buffer, 220, 50) == PIPE_COLOR
    assert _pixel(buffer, 220, 222) == PIPE_CAP_COLOR
    assert _pixel(buffer, 220, 300) == SKY_COLOR
    assert _pixel(buffer, 220, 378) == PIPE_CAP_COLOR
    assert _pixel(buffer, 220, 450) == PIPE_COLOR
    assert _pixel(buffer, 220, 560) == GROUND_COLOR

    assert _pixel(buffer, 95, 290) == BIRD_COLOR


def test_render_reuses_buffer_and_does_not_mutate_state(settings: Settings) -> None:
    state = GameState(
        avatar=Avatar(x=100, y=250, velocity=3.0, angle=0.4),
        obstacles=[Obstacle(x=50, gap_center=200, scored=True), Obstacle(x=390, gap_center=420)],
        score=2,
        best_score=7,
    )
    before = copy.deepcopy(state)
    target = new_buffer(400, 600)

    result = render_frame(state, settings, target)

    assert result is target
    assert state == before


def test_avatar_rotation_changes_the_picture(settings: Settings) -> None:
    level = render_frame(GameState(avatar=Avatar(x=100, y=300, angle=0.0)), settings)
    diving = render_frame(GameState(avatar=Avatar(x=100, y=300, angle=1.1)), settings)

    assert not np.array_equal(level, diving)


def test_offscreen_obstacles_are_clipped(settings: Settings) -> None:
    state = GameState(
        avatar=Avatar(x=100, y=300),
        obstacles=[Obstacle(x=-40, gap_center=300), Obstacle(x=410, gap_center=300)],
    )

    buffer = render_frame(state, settings)

    assert _pixel(buffer, 5, 50) == PIPE_COLOR
    assert _pixel(buffer, 399, 50) == SKY_COLOR


def test_draw_polygon_fills_triangle() -> None:
    buffer = new_buffer(10, 10)
    draw_polygon(buffer, [(0, 0), (10, 0), (0, 10)], (255, 0, 0))

    assert _pixel(buffer, 1, 1) == (255, 0, 0)
    assert _pixel(buffer, 9, 9) == (0, 0, 0)


def test_rotate_quarter_turn() -> None:
    x, y = rotate((1.0, 0.0), np.pi / 2, (5.0, 5.0))
    assert (round(x, 6), round(y, 6)) == (5.0, 6.0)


# HUD

def test_format_score() -> None:
    assert format_score(4, 9, Phase.READY) == "4"
    assert format_score(4, 9, Phase.RUNNING) == "4"
    assert format_score(4, 9, Phase.OVER) == "4  (best: 9)"


def test_message_per_phase() -> None:
    assert message_for(Phase.READY) == READY_MESSAGE
    assert message_for(Phase.RUNNING) is None
    assert message_for(Phase.OVER) == GAME_OVER_MESSAGE


def test_hud_follows_the_game(settings: Settings) -> None:
    bus = EventBus()
    controller = GameController(settings, event_bus=bus)
    hud = Hud()
    hud.bind(bus)

    assert hud.score_text == "0"
    assert hud.message_visible

    controller.step(0.0)
    controller.activate()
    assert not hud.message_visible

    controller.state.score = 2
    controller.state.avatar.y = 5
    controller.step(16.6)

    assert hud.score_text == "2  (best: 2)"
    assert hud.message == GAME_OVER_MESSAGE

    controller.restart()
    assert hud.score_text == "0"
    assert hud.message == READY_MESSAGE

    hud.unbind()
    controller.activate()
    assert hud.message == READY_MESSAGE
