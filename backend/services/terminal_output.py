"""
Terminal renderer for the snake game.

Draws onto a curses window using 1-based (x, y) terminal coordinates,
matching the GridCell convention of the domain package.

The look follows the classic terminal version:
- reverse-video border one cell outside the playable rectangle
- snake segments spelling "S n a a ... k e" on green
- food drawn as "Ó" on red
"""

import curses
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from domain.grid import Grid, GridCell
from .terminal_session import SNAKE_PAIR, FOOD_PAIR

logger = logging.getLogger(__name__)

FOOD_CHAR = "Ó"
BORDER_CHAR = " "
EMPTY_CHAR = " "


def segment_char(index: int, length: int) -> str:
    """Letter drawn for the body segment at index in a snake of length cells."""
    if index == 0:
        return "S"
    if index == length - 1:
        return "e"
    if index == 1:
        return "n"
    if index == length - 2:
        return "k"
    return "a"


class TerminalOutput:
    """Responsible for all drawing tasks."""

    def __init__(self, window, use_color: Optional[bool] = None):
        self.window = window
        if use_color is None:
            use_color = curses.has_colors()
        self.snake_attr = curses.color_pair(SNAKE_PAIR) if use_color else curses.A_REVERSE
        self.food_attr = (curses.color_pair(FOOD_PAIR) if use_color else curses.A_NORMAL) | curses.A_BOLD
        self.border_attr = curses.A_REVERSE

    def size(self) -> Tuple[int, int]:
        rows, cols = self.window.getmaxyx()
        return cols, rows

    def _put(self, x: int, y: int, text: str, attr: int = curses.A_NORMAL) -> None:
        try:
            self.window.addstr(y - 1, x - 1, text, attr)
        except curses.error:
            # Writing the bottom-right cell, or off screen after a resize
            pass

    def clear(self) -> None:
        self.window.erase()

    def draw_border(self, grid: Grid) -> None:
        left, right = grid.x_min - 1, grid.x_max + 1
        top, bottom = grid.y_min - 1, grid.y_max + 1
        for x in range(left, right + 1):
            self._put(x, top, BORDER_CHAR, self.border_attr)
            self._put(x, bottom, BORDER_CHAR, self.border_attr)
        for y in range(top + 1, bottom):
            self._put(left, y, BORDER_CHAR, self.border_attr)
            self._put(right, y, BORDER_CHAR, self.border_attr)

    def draw_snake(self, body: Sequence[GridCell], vacated_tail: Optional[GridCell] = None) -> None:
        if vacated_tail is not None:
            self.undraw(vacated_tail)
        length = len(body)
        for index, (x, y) in enumerate(body):
            self._put(x, y, segment_char(index, length), self.snake_attr)

    def draw_food(self, cell: Optional[GridCell]) -> None:
        if cell is None:
            return
        self._put(cell.x, cell.y, FOOD_CHAR, self.food_attr)

    def undraw(self, cell: GridCell) -> None:
        self._put(cell.x, cell.y, EMPTY_CHAR)

    def draw_message(self, text: str, position: Tuple[int, int], bold: bool = False) -> None:
        x, y = position
        self._put(x, y, text, curses.A_BOLD if bold else curses.A_NORMAL)

    def draw_banner(self, lines: Iterable[str], bold: bool = True) -> None:
        """Draw lines centred on the screen, one per row."""
        rows: List[str] = list(lines)
        width, height = self.size()
        top = max(1, (height - len(rows)) // 2 + 1)
        for offset, line in enumerate(rows):
            x = max(1, (width - len(line)) // 2 + 1)
            self.draw_message(line, (x, top + offset), bold=bold)

    def flush(self) -> None:
        self.window.refresh()

    def reset(self) -> None:
        """Leave the screen blank with the cursor visible again."""
        self.window.erase()
        self.window.refresh()
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("Terminal does not support showing the cursor")
