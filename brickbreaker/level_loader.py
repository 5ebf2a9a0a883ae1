"""Brick layout builder.

Turns a BrickGridConfig into the ordered list of bricks for a round,
either as a full rows x columns rectangle or from an ASCII art map.
"""

from typing import Iterator, List, Tuple

from .config import BrickGridConfig
from .entities.brick import Brick

# Characters that leave a gap in an ASCII layout
EMPTY_MARKERS = (' ', '.', '-', '_')


def _grid_cells(grid: BrickGridConfig) -> Iterator[Tuple[int, int]]:
    """Yield (row, col) for every cell holding a brick, row-major."""
    if grid.layout:
        lines = grid.layout.strip('\n').split('\n')
        for row, line in enumerate(lines):
            for col, char in enumerate(line.rstrip()):
                if char in EMPTY_MARKERS:
                    continue
                yield row, col
        return

    for row in range(grid.rows):
        for col in range(grid.columns):
            yield row, col


def brick_position(grid: BrickGridConfig, row: int, col: int) -> Tuple[float, float]:
    """Get the left/top corner of a grid cell."""
    x = grid.offset_left + col * (grid.width + grid.padding)
    y = grid.offset_top + row * (grid.height + grid.padding)
    return x, y


def build_brick_grid(grid: BrickGridConfig) -> List[Brick]:
    """Create the bricks for a round in layout order.

    Colors cycle through ``grid.colors`` by row.

    Args:
        grid: Brick grid configuration

    Returns:
        Bricks ordered row by row, left to right
    """
    bricks = []
    for row, col in _grid_cells(grid):
        x, y = brick_position(grid, row, col)
        color = grid.colors[row % len(grid.colors)]
        bricks.append(Brick(x, y, grid.width, grid.height, color, (row, col)))
    return bricks
