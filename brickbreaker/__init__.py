"""BrickBreaker - ball-and-paddle physics core and session state machine."""

from .config import ConfigError, GameConfig, build_config, load_config
from .entities import Ball, Brick, Paddle
from .frame_scheduler import FrameScheduler
from .game_state import GameState
from .physics import CollisionEngine, CollisionReport
from .session import GameSession

__version__ = "1.0.0"

__all__ = [
    'Ball',
    'Brick',
    'CollisionEngine',
    'CollisionReport',
    'ConfigError',
    'FrameScheduler',
    'GameConfig',
    'GameSession',
    'GameState',
    'Paddle',
    'build_config',
    'load_config',
]
