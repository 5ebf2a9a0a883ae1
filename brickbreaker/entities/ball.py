"""Ball entity with per-frame velocity integration.

The ball bounces off the side and top walls on its own. Falling out of
the bottom of the arena is reported to the owner, which decides what
a lost ball means.
"""

from typing import Tuple

from ..arena import BallArena, Rect
from ..config import BallConfig


class Ball:
    """Ball with independent dx/dy components and a capped scalar speed.

    ``speed`` caps the magnitude used by collision responses; dx and dy
    are tracked separately and are not renormalized to it.
    """

    def __init__(self, config: BallConfig, arena: BallArena):
        """Initialize ball at the round-start position.

        Args:
            config: Ball configuration
            arena: Bounds provider and ball-lost event sink
        """
        self._config = config
        self._arena = arena
        self._x = 0.0
        self._y = 0.0
        self._speed = 0.0
        self._dx = 0.0
        self._dy = 0.0
        self.reset()

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value

    @property
    def dx(self) -> float:
        """Get X velocity (pixels per frame)."""
        return self._dx

    @dx.setter
    def dx(self, value: float) -> None:
        self._dx = value

    @property
    def dy(self) -> float:
        """Get Y velocity (pixels per frame)."""
        return self._dy

    @dy.setter
    def dy(self, value: float) -> None:
        self._dy = value

    @property
    def size(self) -> float:
        """Get ball radius."""
        return self._config.size

    radius = size

    @property
    def speed(self) -> float:
        """Get current scalar speed."""
        return self._speed

    @property
    def max_speed(self) -> float:
        return self._config.max_speed

    @property
    def position(self) -> Tuple[float, float]:
        return (self._x, self._y)

    def set_speed(self, speed: float) -> None:
        """Set scalar speed, capped at the configured maximum."""
        self._speed = max(0.0, min(speed, self._config.max_speed))

    def increase_speed(self) -> float:
        """Raise speed by the configured increment, capped at max_speed.

        Returns:
            The new speed
        """
        self.set_speed(self._speed + self._config.speed_increase)
        return self._speed

    def update(self) -> None:
        """Advance one frame and bounce off the side and top walls."""
        self._x += self._dx
        self._y += self._dy

        width = self._arena.width
        height = self._arena.height

        if self._x - self.size < 0 or self._x + self.size > width:
            self._dx = -self._dx

        if self._y - self.size < 0:
            self._dy = -self._dy

        # Entirely below the bottom edge
        if self._y - self.size > height:
            self._arena.ball_lost()

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self._x - self.size,
            self._y - self.size,
            self._x + self.size,
            self._y + self.size,
        )

    def collides_with(self, rect: Rect) -> bool:
        """Check whether the ball's bounding square overlaps a rectangle.

        Edges that only touch do not count as overlap.
        """
        left, top, right, bottom = self.get_bounds()
        return (
            right > rect.x and
            left < rect.x + rect.width and
            bottom > rect.y and
            top < rect.y + rect.height
        )

    def reset(self) -> None:
        """Return to the round-start position, speed, and direction."""
        self._x = self._arena.width / 2
        self._y = self._arena.height - self._config.start_offset
        self.set_speed(self._config.speed)
        self._dx = self._speed
        self._dy = -self._speed

    def __repr__(self) -> str:
        return (
            f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
            f"dx={self._dx:.2f}, dy={self._dy:.2f}, speed={self._speed:.2f})"
        )
