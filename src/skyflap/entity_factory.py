"""
entity_factory.py: Builds pipes, clouds and fresh worlds.

Every random draw goes through the `rng` argument so a seeded
`random.Random` reproduces a run exactly.
"""

import logging
import random

from .constants import (
    BIRD_RADIUS, BIRD_START_Y, BIRD_X, CLOUD_COUNT, CLOUD_HEIGHT_RATIO,
    CLOUD_MIN_RADIUS, CLOUD_MIN_SPEED, CLOUD_RADIUS_RANGE,
    CLOUD_RESPAWN_OFFSET, CLOUD_SPEED_RANGE, MOVING_PIPE_CHANCE,
    MOVING_PIPE_LEVEL, NARROW_GAP_CHANCE, NARROW_GAP_LEVEL, NARROW_GAP_RATIO,
    PIPE_GAP, PIPE_MARGIN, PIPE_WIDTH
)
from .data_models import Bird, Cloud, Pipe, Progression, World
from .scaling import resolve_scale

logger = logging.getLogger(__name__)


def gap_for_level(level: int, scale_factor: float, rng: random.Random) -> float:
    """Base gap, narrowed on an independent 25% draw from level 3 on."""
    base_gap = PIPE_GAP * scale_factor
    if level >= NARROW_GAP_LEVEL and rng.random() < NARROW_GAP_CHANCE:
        return base_gap * NARROW_GAP_RATIO
    return base_gap


def create_pipe(spawn_x: float, level: int, scale_factor: float,
                canvas_height: float, rng: random.Random) -> Pipe:
    """Generates a new pipe whose gap fits on screen with a margin on both sides."""
    gap = gap_for_level(level, scale_factor, rng)
    margin = PIPE_MARGIN * scale_factor
    span = max(canvas_height - gap - 2 * margin, 0.0)
    top = rng.random() * span + margin

    moving = level >= MOVING_PIPE_LEVEL and rng.random() < MOVING_PIPE_CHANCE
    move_speed = (rng.random() - 0.5) * 2 * scale_factor if moving else 0.0

    pipe = Pipe(
        x=float(spawn_x),
        top=top,
        bottom=top + gap,
        width=PIPE_WIDTH * scale_factor,
        moving=moving,
        move_speed=move_speed,
    )
    logger.debug("Spawned pipe at x=%.1f gap=%.1f moving=%s", pipe.x, gap, moving)
    return pipe


def create_cloud(is_initial: bool, canvas_width: float, canvas_height: float,
                 scale_factor: float, rng: random.Random) -> Cloud:
    """
    Initial clouds are spread across the whole sky; recycled ones start
    just past the right edge.
    """
    if is_initial:
        x = rng.random() * canvas_width
    else:
        x = canvas_width + CLOUD_RESPAWN_OFFSET
    return Cloud(
        x=x,
        y=rng.random() * canvas_height * CLOUD_HEIGHT_RATIO,
        radius=(rng.random() * CLOUD_RADIUS_RANGE + CLOUD_MIN_RADIUS) * scale_factor,
        speed=(rng.random() * CLOUD_SPEED_RANGE + CLOUD_MIN_SPEED) * scale_factor,
    )


def create_bird(scale_factor: float) -> Bird:
    return Bird(
        x=BIRD_X * scale_factor,
        y=BIRD_START_Y * scale_factor,
        radius=BIRD_RADIUS * scale_factor,
    )


def create_world(width: float, height: float, rng: random.Random) -> World:
    """A fresh world in the start state: one pipe at the right edge and a sky of clouds."""
    scale_factor = resolve_scale(height)
    progression = Progression()
    world = World(
        width=width,
        height=height,
        scale_factor=scale_factor,
        bird=create_bird(scale_factor),
        progression=progression,
    )
    world.clouds = [
        create_cloud(True, width, height, scale_factor, rng)
        for _ in range(CLOUD_COUNT)
    ]
    world.pipes.append(
        create_pipe(width, progression.level, scale_factor, height, rng))
    return world
