"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional

from .constants import INIT_SNAKE_SIZE
from .grid import Grid, GridCell


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of GridCell from head at index 0 to tail at the end
        vacated_tail: the cell popped off the tail by the last advance(),
            pending either discard or restoration by grow_from_vacated_tail()
    """

    def __init__(self, positions: Iterable):
        self.positions = deque(GridCell(*cell) for cell in positions)
        self.vacated_tail: Optional[GridCell] = None

    @classmethod
    def spawn(cls, grid: Grid, row: Optional[int] = None) -> "Snake":
        """
        Lay out a fresh snake horizontally on row, tail at (x_max - 1, row).

        The head is INIT_SNAKE_SIZE cells from the right edge so the snake
        can start heading left. The row defaults to the vertical centre.
        """
        if row is None:
            row = (grid.y_max + grid.y_min) // 2
        return cls(
            GridCell(grid.x_max - i, row) for i in range(INIT_SNAKE_SIZE, 0, -1)
        )

    @property
    def head(self) -> GridCell:
        """Return the head position (first element)."""
        if not self.positions:
            raise RuntimeError("Snake has no body")
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __iter__(self):
        return iter(self.positions)

    def advance(self, new_head: GridCell) -> GridCell:
        """Push new_head to the front and pop the tail, remembering it as vacated."""
        self.positions.appendleft(new_head)
        self.vacated_tail = self.positions.pop()
        return self.vacated_tail

    def grow_from_vacated_tail(self) -> None:
        """Put the last vacated tail back, lengthening the snake by one."""
        if self.vacated_tail is None:
            raise RuntimeError("No vacated tail to restore")
        self.positions.append(self.vacated_tail)
        self.vacated_tail = None

    def has_self_collision(self) -> bool:
        """True if the head overlaps any other body segment."""
        head = self.head
        # Index 0 is the head itself
        return any(segment == head for segment in list(self.positions)[1:])

    def __repr__(self):
        return f"<Snake length={len(self)}, head={self.head}>"
