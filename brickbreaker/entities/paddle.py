"""Paddle entity driven by velocity intent or absolute positioning.

Keyboard-style input sets a velocity intent the paddle applies every
frame; pointer-style input centers the paddle on a given X. Both paths
clamp the paddle inside the arena.
"""

from typing import Tuple

from ..arena import ArenaBounds
from ..config import PaddleConfig


class Paddle:
    """Player paddle. ``x`` and ``y`` are the left and top edges."""

    def __init__(self, config: PaddleConfig, arena: ArenaBounds):
        """Initialize paddle centered near the bottom of the arena.

        Args:
            config: Paddle configuration
            arena: Bounds provider
        """
        self._config = config
        self._arena = arena

        self._x = (arena.width - config.width) / 2
        self._y = arena.height - config.height - config.bottom_margin
        self._dx = 0.0

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top edge Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get current velocity intent."""
        return self._dx

    @property
    def speed(self) -> float:
        return self._config.speed

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def left(self) -> float:
        return self._x

    @property
    def right(self) -> float:
        return self._x + self._config.width

    @property
    def top(self) -> float:
        return self._y

    @property
    def bottom(self) -> float:
        return self._y + self._config.height

    @property
    def center_x(self) -> float:
        return self._x + self._config.width / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def _clamp(self) -> None:
        """Keep the paddle within [0, arena width - paddle width]."""
        if self._x < 0:
            self._x = 0.0
        if self._x + self._config.width > self._arena.width:
            self._x = self._arena.width - self._config.width

    def update(self) -> None:
        """Apply velocity intent for one frame."""
        self._x += self._dx
        self._clamp()

    def move_left(self) -> None:
        self._dx = -self._config.speed

    def move_right(self) -> None:
        self._dx = self._config.speed

    def stop(self) -> None:
        self._dx = 0.0

    def set_position(self, x: float) -> None:
        """Center the paddle on ``x`` (pointer input), then clamp.

        Args:
            x: Desired paddle center in arena coordinates
        """
        self._x = x - self._config.width / 2
        self._clamp()

    def __repr__(self) -> str:
        return f"Paddle(x={self._x:.2f}, y={self._y:.2f}, dx={self._dx:.2f})"
