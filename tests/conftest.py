import random

import pytest

from skyflap.game_engine import GameEngine
from skyflap.interfaces import MemoryHighScore


class ScriptedRandom:
    """Returns a fixed sequence from random() so every draw is visible in the test."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class RecordingHighScore(MemoryHighScore):
    def __init__(self, best=0):
        super().__init__(best)
        self.writes = []

    def set_high_score(self, score):
        super().set_high_score(score)
        self.writes.append(score)


class RecordingAudio:
    def __init__(self):
        self.cues = []

    def play(self, cue):
        self.cues.append(cue)


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, world):
        self.frames.append((world.state, world.score))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def store():
    return RecordingHighScore()


@pytest.fixture
def engine(audio, store, rng):
    # 600 high means a scale factor of exactly 1.0
    return GameEngine(480, 600, store=store, audio=audio, rng=rng)
