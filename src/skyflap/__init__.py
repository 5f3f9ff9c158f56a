"""
skyflap: a scaled, level-based flappy bird simulation with a pygame front end.
"""

from .data_models import Bird, Cloud, GameState, Pipe, Progression, World
from .game_engine import GameEngine
from .state_machine import InputEvent

__all__ = [
    "Bird", "Cloud", "GameEngine", "GameState", "InputEvent", "Pipe",
    "Progression", "World",
]
