"""BrickBreaker game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick

__all__ = [
    'Paddle',
    'Ball',
    'Brick',
]
