"""
state_machine.py: Allowed transitions between start, playing and game over.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from .data_models import GameState


class InputEvent(Enum):
    FLAP = "flap"
    START = "start"
    RESTART = "restart"
    RESIZE = "resize"


_TRANSITIONS: Dict[Tuple[GameState, InputEvent], GameState] = {
    (GameState.START, InputEvent.START): GameState.PLAYING,
    (GameState.GAME_OVER, InputEvent.RESTART): GameState.PLAYING,
    (GameState.PLAYING, InputEvent.FLAP): GameState.PLAYING,
}


def next_state(state: GameState, event: InputEvent) -> Optional[GameState]:
    """
    Returns the state an input event leads to, or None when the event is
    ignored in `state`. Resize is accepted everywhere and always lands in START.
    """
    if event is InputEvent.RESIZE:
        return GameState.START
    return _TRANSITIONS.get((state, event))
