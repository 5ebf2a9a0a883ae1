"""Brick entity.

A brick is a fixed rectangle that breaks on the first hit. Broken bricks
stay in the session's list (so layout order is stable) but are skipped
by collision checks and skins.
"""

from typing import Tuple


class Brick:
    """A single breakable brick."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            color: Color tag looked up by skins
            grid_position: (row, col) position in grid
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._color = color
        self._grid_position = grid_position
        self._broken = False

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def color(self) -> str:
        return self._color

    @property
    def center_x(self) -> float:
        return self._x + self._width / 2

    @property
    def center_y(self) -> float:
        return self._y + self._height / 2

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def broken(self) -> bool:
        return self._broken

    @property
    def is_active(self) -> bool:
        """Check if brick can still be hit."""
        return not self._broken

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._width,
            self._y + self._height,
        )

    def break_(self) -> None:
        """Mark the brick broken. Breaking twice has no further effect."""
        self._broken = True

    def __repr__(self) -> str:
        state = "broken" if self._broken else "active"
        return f"Brick({self._grid_position}, {self._color}, {state})"
