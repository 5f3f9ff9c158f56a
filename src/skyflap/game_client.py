#!/usr/bin/env python3
"""
game_client.py

Pygame front end: window, input mapping, frame clock and rendering.
The simulation itself lives in game_engine; this module only feeds it
input events and draws the world it produces.
"""

import argparse
import logging
import math
import random
from typing import Iterator, List, Tuple

import pygame

from .audio import open_audio
from .constants import DB_FILE, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import GameState, World
from .game_engine import GameEngine
from .score_db import HighScoreDatabase
from .state_machine import InputEvent

logger = logging.getLogger(__name__)

SKY_TOP = (112, 197, 206)
SKY_BOTTOM = (222, 244, 247)
CLOUD_COLOR = (255, 255, 255)
PIPE_COLOR = (83, 160, 52)
PIPE_HEAD_COLOR = (60, 125, 35)
BIRD_COLOR = (255, 215, 0)
BEAK_COLOR = (255, 165, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
OVERLAY = (0, 0, 0, 140)


def _rotate(points: List[Tuple[float, float]], angle: float,
            origin: Tuple[float, float]) -> List[Tuple[float, float]]:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    ox, oy = origin
    return [(ox + x * cos_a - y * sin_a, oy + x * sin_a + y * cos_a) for x, y in points]


class PygameRenderer:
    """Draws a World onto the display surface. Never mutates the world."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)

    def render(self, world: World) -> None:
        self._draw_background(world)
        self._draw_clouds(world)
        self._draw_bird(world)
        for pipe in world.pipes:
            self._draw_pipe(world, pipe)
        self._draw_hud(world)
        pygame.display.flip()

    def _draw_background(self, world: World):
        height = int(world.height)
        for y in range(0, height, 4):
            t = y / max(height, 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.rect(self.screen, color, (0, y, int(world.width), 4))

    def _draw_clouds(self, world: World):
        for cloud in world.clouds:
            r = cloud.radius
            pygame.draw.circle(self.screen, CLOUD_COLOR, (int(cloud.x), int(cloud.y)), int(r))
            pygame.draw.circle(self.screen, CLOUD_COLOR,
                               (int(cloud.x + r * 0.7), int(cloud.y - r * 0.5)), int(r * 0.8))
            pygame.draw.circle(self.screen, CLOUD_COLOR,
                               (int(cloud.x + r * 1.8), int(cloud.y)), int(r))

    def _draw_bird(self, world: World):
        bird = world.bird
        r = bird.radius
        center = (bird.x, bird.y)
        pygame.draw.circle(self.screen, BIRD_COLOR, (int(bird.x), int(bird.y)), int(r))

        eye, pupil = _rotate([(r * 0.3, -r * 0.4), (r * 0.4, -r * 0.4)], bird.rotation, center)
        pygame.draw.circle(self.screen, WHITE, (int(eye[0]), int(eye[1])), max(int(r * 0.3), 1))
        pygame.draw.circle(self.screen, BLACK, (int(pupil[0]), int(pupil[1])), max(int(r * 0.15), 1))

        beak = _rotate([(r * 0.5, 0), (r * 1.2, -r * 0.2), (r * 1.2, r * 0.2)],
                       bird.rotation, center)
        pygame.draw.polygon(self.screen, BEAK_COLOR, beak)

    def _draw_pipe(self, world: World, pipe):
        s = world.scale_factor
        head_height = 25 * s
        head_overhang = 5 * s

        pygame.draw.rect(self.screen, PIPE_COLOR, (pipe.x, 0, pipe.width, pipe.top))
        pygame.draw.rect(self.screen, PIPE_HEAD_COLOR,
                         (pipe.x - head_overhang, pipe.top - head_height,
                          pipe.width + 2 * head_overhang, head_height))

        pygame.draw.rect(self.screen, PIPE_COLOR,
                         (pipe.x, pipe.bottom, pipe.width, world.height - pipe.bottom))
        pygame.draw.rect(self.screen, PIPE_HEAD_COLOR,
                         (pipe.x - head_overhang, pipe.bottom,
                          pipe.width + 2 * head_overhang, head_height))

    def _blit_centered(self, text: str, font: pygame.font.Font, y: float, world: World):
        surf = font.render(text, True, WHITE)
        self.screen.blit(surf, (world.width // 2 - surf.get_width() // 2, y))

    def _draw_hud(self, world: World):
        score = self.font.render(f"Score: {world.score}", True, WHITE)
        level = self.font.render(f"Level: {world.level}", True, WHITE)
        self.screen.blit(score, (10, 10))
        self.screen.blit(level, (world.width - level.get_width() - 10, 10))

        if world.state is GameState.PLAYING:
            return

        shade = pygame.Surface((int(world.width), int(world.height)), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.screen.blit(shade, (0, 0))

        middle = world.height // 2
        if world.state is GameState.START:
            self._blit_centered("Skyflap", self.large_font, middle - 60, world)
            self._blit_centered("Space / Click to start", self.font, middle, world)
        else:
            self._blit_centered("Game Over", self.large_font, middle - 80, world)
            self._blit_centered(f"Score: {world.score}", self.font, middle - 30, world)
            if world.new_high_score:
                best = "New High Score!"
            else:
                best = f"High Score: {world.high_score}"
            self._blit_centered(best, self.font, middle, world)
            self._blit_centered("Space / Click to restart", self.font, middle + 40, world)


class GameClient:
    """Maps pygame events onto engine input and drives one tick per frame."""

    def __init__(self, engine: GameEngine, fps: int = RENDER_FPS):
        self.engine = engine
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (int(engine.world.width), int(engine.world.height)), pygame.RESIZABLE)
        pygame.display.set_caption("Skyflap")
        self.renderer = PygameRenderer(self.screen)
        self.clock = pygame.time.Clock()
        self.running = True

    def press_space(self):
        """Space starts a new game from any menu and flaps while playing."""
        state = self.engine.state
        if state is GameState.START:
            self.engine.dispatch(InputEvent.START)
        elif state is GameState.GAME_OVER:
            self.engine.dispatch(InputEvent.RESTART)
        else:
            self.engine.dispatch(InputEvent.FLAP)

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.press_space()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # The overlay acts as the start/restart button
            self.press_space()
        elif event.type == pygame.VIDEORESIZE:
            width, height = event.size
            if width <= 0 or height <= 0:
                return
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            self.renderer.screen = self.screen
            self.engine.dispatch(InputEvent.RESIZE, width, height)

    def frames(self) -> Iterator[int]:
        """One tick per displayed frame, with that frame's input already applied."""
        frame = 0
        while self.running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                return
            frame += 1
            yield frame

    def run(self):
        """Feeds frames to the engine until the window closes or Escape is pressed."""
        self.engine.run(self.frames(), self.renderer)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Skyflap arcade game")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps", type=int, default=RENDER_FPS)
    parser.add_argument("--db", default=DB_FILE, help="high score database file")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe and cloud generation")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")

    pygame.init()
    store = HighScoreDatabase(args.db)
    engine = GameEngine(args.width, args.height, store=store,
                        audio=open_audio(), rng=random.Random(args.seed))
    logger.info("Starting with high score %d", store.get_high_score())
    try:
        GameClient(engine, args.fps).run()
    finally:
        store.close()
        pygame.quit()


if __name__ == "__main__":
    main()
