"""
game_engine.py: The authoritative single-player world simulation.
"""

import logging
import random
from typing import Iterable, Optional

from .constants import PIPE_SPAWN_DISTANCE, SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import GameState, World
from .entity_factory import create_cloud, create_pipe, create_world
from .interfaces import (
    AudioCue, AudioSink, HighScoreStore, MemoryHighScore, NullAudio,
    NullRenderer, RenderSink
)
from .physics_core import PhysicsCore
from .progression import ProgressionManager
from .state_machine import InputEvent, next_state

logger = logging.getLogger(__name__)


class GameEngine(PhysicsCore):
    """
    Owns the World and everything that mutates it: input events, the
    per-tick update and the game over transition.
    Inherits physics and collision from PhysicsCore.
    """

    def __init__(self, width: float = SCREEN_WIDTH, height: float = SCREEN_HEIGHT,
                 store: Optional[HighScoreStore] = None,
                 audio: Optional[AudioSink] = None,
                 rng: Optional[random.Random] = None):
        self.store = store if store is not None else MemoryHighScore()
        self.audio = audio if audio is not None else NullAudio()
        self.rng = rng if rng is not None else random.Random()
        self.progression_manager = ProgressionManager()
        self.tick_count = 0
        self.world: World = create_world(width, height, self.rng)

    @property
    def state(self) -> GameState:
        return self.world.state

    # ---------- Input ----------

    def dispatch(self, event: InputEvent, width: Optional[float] = None,
                 height: Optional[float] = None) -> bool:
        """
        Applies an input event. Returns False when the event is ignored
        in the current state.
        """
        target = next_state(self.world.state, event)
        if target is None:
            return False

        if event is InputEvent.RESIZE:
            self.reset(width if width is not None else self.world.width,
                       height if height is not None else self.world.height)
        elif event is InputEvent.FLAP:
            self.flap(self.world.bird)
            self.audio.play(AudioCue.FLAP)
        else:
            self.start_game()
        return True

    def reset(self, width: float, height: float):
        """Throws away the current world, including a game in progress."""
        self.world = create_world(width, height, self.rng)
        logger.info("World reset to %dx%d (scale %.3f)",
                    width, height, self.world.scale_factor)

    def start_game(self):
        self.world = create_world(self.world.width, self.world.height, self.rng)
        self.world.state = GameState.PLAYING
        logger.info("Game started")

    def game_over(self) -> bool:
        """
        Freezes the world and records the high score. Only the first call
        after a collision has any effect.
        """
        world = self.world
        if world.state is not GameState.PLAYING:
            return False

        world.state = GameState.GAME_OVER
        self.audio.play(AudioCue.GAME_OVER)

        best = self.store.get_high_score()
        if world.score > best:
            self.store.set_high_score(world.score)
            world.high_score = world.score
            world.new_high_score = True
        else:
            world.high_score = best
        logger.info("Game over: score=%d level=%d best=%d",
                    world.score, world.level, world.high_score)
        return True

    # ---------- Simulation ----------

    def step(self):
        """Advances the world by one tick."""
        self.tick_count += 1
        world = self.world

        self._step_clouds()
        if world.state is not GameState.PLAYING:
            return

        bird = world.bird
        self.integrate(bird)
        self.update_rotation(bird)

        # Walk from the tail so removal by index stays valid
        for i in range(len(world.pipes) - 1, -1, -1):
            pipe = world.pipes[i]
            self.scroll_pipe(pipe, world.progression.game_speed, world.scale_factor)

            if self.check_collision(bird, pipe):
                self.game_over()
                return

            if self.progression_manager.try_pass(world.progression, pipe, bird):
                self.audio.play(AudioCue.SCORED)

            if self.is_offscreen(pipe):
                del world.pipes[i]

        self._spawn_pipe()

        if self.out_of_bounds(bird, world.height):
            self.game_over()

        if world.state is GameState.PLAYING:
            for pipe in world.pipes:
                self.oscillate_pipe(pipe, world.scale_factor, world.height)

    def _step_clouds(self):
        world = self.world
        for cloud in world.clouds:
            self.drift_cloud(cloud)
            if self.cloud_offscreen(cloud):
                # Recycled in place, the population never changes
                fresh = create_cloud(
                    False, world.width, world.height, world.scale_factor, self.rng)
                cloud.x, cloud.y = fresh.x, fresh.y
                cloud.radius, cloud.speed = fresh.radius, fresh.speed

    def _spawn_pipe(self):
        """Adds a pipe at the right edge once the last one is far enough in."""
        world = self.world
        last_pipe = world.pipes[-1] if world.pipes else None
        if last_pipe is None or \
                world.width - last_pipe.x >= PIPE_SPAWN_DISTANCE * world.scale_factor:
            world.pipes.append(create_pipe(
                world.width, world.level, world.scale_factor, world.height, self.rng))

    def run(self, ticks: Iterable, renderer: Optional[RenderSink] = None):
        """Steps once and renders once for every tick the frame source yields."""
        renderer = renderer if renderer is not None else NullRenderer()
        for _ in ticks:
            self.step()
            renderer.render(self.world)
