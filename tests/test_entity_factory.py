import random

import pytest

from skyflap.data_models import GameState
from skyflap.entity_factory import create_cloud, create_pipe, create_world

from conftest import ScriptedRandom


def test_level_one_pipes_use_base_gap_and_never_move(rng):
    for _ in range(300):
        pipe = create_pipe(480, 1, 1.0, 600, rng)
        assert pipe.gap == pytest.approx(160)
        assert pipe.moving is False
        assert pipe.move_speed == 0.0
        assert pipe.passed is False


def test_pipe_geometry_is_scaled(rng):
    pipe = create_pipe(900, 1, 2.0, 2400, rng)
    assert pipe.x == 900
    assert pipe.width == pytest.approx(120)
    assert pipe.gap == pytest.approx(320)


def test_gap_always_fits_with_margin(rng):
    for level in (1, 2, 3, 7):
        for _ in range(200):
            pipe = create_pipe(480, level, 1.0, 600, rng)
            assert pipe.top >= 50
            assert pipe.bottom <= 600 - 50 + 1e-9


def test_high_level_gap_takes_one_of_two_values(rng):
    gaps = {round(create_pipe(480, 3, 1.0, 600, rng).gap, 6) for _ in range(500)}
    assert gaps == {160.0, 128.0}


def test_narrow_gap_draw_order():
    # narrow draw, then top draw, then moving draw
    pipe = create_pipe(480, 3, 1.0, 600, ScriptedRandom(0.1, 0.5, 0.9))
    assert pipe.gap == pytest.approx(128)
    assert pipe.top == pytest.approx(0.5 * (600 - 128 - 100) + 50)
    assert pipe.bottom == pytest.approx(pipe.top + 128)
    assert pipe.moving is False


def test_moving_pipe_drift_speed():
    pipe = create_pipe(480, 2, 1.5, 600, ScriptedRandom(0.5, 0.2, 0.75))
    assert pipe.moving is True
    assert pipe.move_speed == pytest.approx(0.25 * 2 * 1.5)


def test_drift_speed_bounded_by_scale(rng):
    moving = [p for p in (create_pipe(480, 2, 1.2, 600, rng) for _ in range(300)) if p.moving]
    assert moving
    assert all(-1.2 <= p.move_speed <= 1.2 for p in moving)


def test_tiny_canvas_pins_gap_to_top_margin(rng):
    scale = (100 / 600) ** 0.5
    pipe = create_pipe(100, 1, scale, 100, rng)
    assert pipe.top == pytest.approx(50 * scale)


def test_same_seed_same_pipes():
    first = [create_pipe(480, 4, 1.0, 600, random.Random(7)) for _ in range(3)]
    second = [create_pipe(480, 4, 1.0, 600, random.Random(7)) for _ in range(3)]
    assert first == second


def test_initial_clouds_spread_over_sky(rng):
    for _ in range(200):
        cloud = create_cloud(True, 480, 600, 1.0, rng)
        assert 0 <= cloud.x < 480
        assert 0 <= cloud.y < 360
        assert 20 <= cloud.radius < 40
        assert 0.2 <= cloud.speed < 0.7


def test_recycled_cloud_starts_off_screen(rng):
    cloud = create_cloud(False, 480, 600, 2.0, rng)
    assert cloud.x == 580
    assert 40 <= cloud.radius < 80
    assert 0.4 <= cloud.speed < 1.4


def test_fresh_world(rng):
    world = create_world(480, 2400, rng)
    assert world.state is GameState.START
    assert world.scale_factor == pytest.approx(2.0)
    assert (world.bird.x, world.bird.y, world.bird.radius) == (200, 300, 30)
    assert world.bird.velocity == 0
    assert world.bird.gravity == pytest.approx(0.35)
    assert world.bird.lift == pytest.approx(-6)
    assert len(world.clouds) == 5
    assert len(world.pipes) == 1
    assert world.pipes[0].x == 480
    assert (world.score, world.level) == (0, 1)
    assert world.progression.game_speed == pytest.approx(3.0)
