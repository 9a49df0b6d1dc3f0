"""
Grid model: the playable rectangle and its wrap-around arithmetic.
"""

import math
from typing import Iterator, NamedTuple

from .constants import (
    UP, DOWN, LEFT, RIGHT,
    INIT_SNAKE_SIZE,
    MIN_TERMINAL_SIZE,
    TERM_MIN_COORD,
)


class GridCell(NamedTuple):
    """One (x, y) cell, in 1-based terminal coordinates."""
    x: int
    y: int


class Grid:
    """
    The rectangular playable region.

    Bounds are inclusive on all four sides. Movement off one edge
    re-enters at the opposite edge, so the grid has no solid walls.

    Attributes:
        x_min, x_max: inclusive column bounds
        y_min, y_max: inclusive row bounds
    """

    def __init__(self, x_min: int, y_min: int, x_max: int, y_max: int):
        if x_min < 1 or y_min < 1:
            raise ValueError(f"Grid origin must be positive, got ({x_min}, {y_min})")
        if x_min > x_max or y_min > y_max:
            raise ValueError(
                f"Inverted grid bounds: x {x_min}..{x_max}, y {y_min}..{y_max}"
            )
        # Room for the initial snake, laid out leftwards from x_max - 1
        if x_max - INIT_SNAKE_SIZE < x_min:
            raise ValueError(
                f"Grid x {x_min}..{x_max} is too narrow for a snake of {INIT_SNAKE_SIZE} cells"
            )
        self.x_min = x_min
        self.y_min = y_min
        self.x_max = x_max
        self.y_max = y_max

    @classmethod
    def from_terminal(cls, width: int, height: int, playable_fraction: float) -> "Grid":
        """
        Compute the playable rectangle for a terminal of width x height cells.

        The rectangle is inset from every terminal edge so a one-cell border
        fits around it, and scaled by playable_fraction (0 < f <= 1).

        Raises:
            ValueError: if the terminal is smaller than the supported minimum,
                the fraction is out of range, or the resulting rectangle cannot
                hold the initial snake.
        """
        if width < MIN_TERMINAL_SIZE or height < MIN_TERMINAL_SIZE:
            raise ValueError(
                f"Terminal too small ({width}x{height}); "
                f"need at least {MIN_TERMINAL_SIZE}x{MIN_TERMINAL_SIZE}"
            )
        if not 0 < playable_fraction <= 1:
            raise ValueError(f"Playable fraction must be in (0, 1], got {playable_fraction}")

        x_min = math.floor(TERM_MIN_COORD + (width - 1) * (1 - playable_fraction))
        y_min = math.floor(TERM_MIN_COORD + (height - 1) * (1 - playable_fraction))
        x_max = math.floor((width - 1) * playable_fraction)
        y_max = math.floor((height - 1) * playable_fraction)
        return cls(x_min, y_min, x_max, y_max)

    @property
    def corners(self):
        return self.x_min, self.y_min, self.x_max, self.y_max

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    def __len__(self) -> int:
        return self.width * self.height

    def __contains__(self, cell) -> bool:
        x, y = cell
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def cells(self) -> Iterator[GridCell]:
        """Yield every cell of the grid, column by column."""
        for x in range(self.x_min, self.x_max + 1):
            for y in range(self.y_min, self.y_max + 1):
                yield GridCell(x, y)

    def next_cell(self, cell: GridCell, direction: str) -> GridCell:
        """
        Return the neighbour of cell in the given direction.

        A cell on the boundary in the direction of travel wraps to the
        opposite boundary on that axis.
        """
        x, y = cell
        if direction == RIGHT:
            return GridCell(self.x_min if x == self.x_max else x + 1, y)
        if direction == LEFT:
            return GridCell(self.x_max if x == self.x_min else x - 1, y)
        if direction == UP:
            return GridCell(x, self.y_max if y == self.y_min else y - 1)
        if direction == DOWN:
            return GridCell(x, self.y_min if y == self.y_max else y + 1)
        raise ValueError(f"Unknown direction '{direction}'")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.corners == other.corners

    def __repr__(self):
        return (
            f"<Grid x={self.x_min}..{self.x_max}, y={self.y_min}..{self.y_max}>"
        )
