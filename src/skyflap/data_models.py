"""
data_models.py: Data structures for the world state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import BASE_GAME_SPEED, GRAVITY, LIFT


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass
class Bird:
    """The player. x is fixed once placed, only y moves."""
    x: float
    y: float
    radius: float
    velocity: float = 0.0
    gravity: float = GRAVITY
    lift: float = LIFT
    rotation: float = 0.0


@dataclass
class Pipe:
    """A pair of barriers with an open gap between top and bottom."""
    x: float
    top: float
    bottom: float
    width: float
    passed: bool = False
    moving: bool = False
    move_speed: float = 0.0

    @property
    def gap(self) -> float:
        return self.bottom - self.top


@dataclass
class Cloud:
    """Background decoration, no effect on gameplay."""
    x: float
    y: float
    radius: float
    speed: float


@dataclass
class Progression:
    score: int = 0
    level: int = 1
    game_speed: float = BASE_GAME_SPEED


@dataclass
class World:
    """
    The single live game aggregate. Rebuilt wholesale on start, restart
    and resize; renderers only read it.
    """
    width: float
    height: float
    scale_factor: float
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    progression: Progression = field(default_factory=Progression)
    state: GameState = GameState.START

    # Filled in on game over
    high_score: int = 0
    new_high_score: bool = False

    @property
    def score(self) -> int:
        return self.progression.score

    @property
    def level(self) -> int:
        return self.progression.level
