"""Session lifecycle states.

START -> PLAYING -> GAME_OVER | WON, and back to PLAYING on restart.
"""
from enum import Enum


class GameState(Enum):
    """Lifecycle states of a play session.

    States:
        START: Entities exist, round not running
        PLAYING: Frame loop active
        GAME_OVER: Lives exhausted (terminal until restart)
        WON: Every brick broken (terminal until restart)
    """
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for states only a restart can leave."""
        return self in (GameState.GAME_OVER, GameState.WON)
