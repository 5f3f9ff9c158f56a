"""
interfaces.py: Contracts for the collaborators around the simulation.
"""

from enum import Enum
from typing import Protocol

from .data_models import World


class AudioCue(Enum):
    FLAP = "flap"
    SCORED = "score"
    GAME_OVER = "gameOver"


class RenderSink(Protocol):
    """Reads the world once per tick, after the update. Must not mutate it."""

    def render(self, world: World) -> None:
        ...


class AudioSink(Protocol):
    """Fire and forget; must return without blocking the tick."""

    def play(self, cue: AudioCue) -> None:
        ...


class HighScoreStore(Protocol):

    def get_high_score(self) -> int:
        ...

    def set_high_score(self, score: int) -> None:
        ...


class NullAudio:
    """Silent audio sink, used when no mixer is available."""

    def play(self, cue: AudioCue) -> None:
        pass


class NullRenderer:
    def render(self, world: World) -> None:
        pass


class MemoryHighScore:
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, best: int = 0):
        self.best = best

    def get_high_score(self) -> int:
        return self.best

    def set_high_score(self, score: int) -> None:
        self.best = score
