"""BrickBreaker physics and collision detection."""

from .collision import (
    CollisionEngine,
    CollisionReport,
    check_paddle_collision,
    check_brick_collision,
    bounce_off_paddle,
    get_bounce_axes,
    resolve_brick_collision,
)

__all__ = [
    'CollisionEngine',
    'CollisionReport',
    'check_paddle_collision',
    'check_brick_collision',
    'bounce_off_paddle',
    'get_bounce_axes',
    'resolve_brick_collision',
]
