"""
Terminal session - puts the terminal in raw, cursor-less mode for the
game and restores it afterwards.
"""

import curses
import logging
import sys
from typing import Tuple

logger = logging.getLogger(__name__)

# Color pair numbers shared with the renderer
SNAKE_PAIR = 1
FOOD_PAIR = 2


class TerminalSession:
    """
    Context manager around curses.initscr()/curses.endwin().

    Usage:
        with TerminalSession() as session:
            window = session.window
            width, height = session.size()

    Raises:
        RuntimeError: if stdin/stdout is not a terminal or curses cannot
            take control of it.
    """

    def __init__(self):
        self.window = None

    def __enter__(self) -> "TerminalSession":
        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            raise RuntimeError("Snake needs an interactive terminal (stdin/stdout is not a TTY)")

        try:
            self.window = curses.initscr()
        except curses.error as e:
            raise RuntimeError(f"Could not initialise the terminal: {e}") from e

        try:
            curses.noecho()
            curses.cbreak()
            self.window.keypad(True)
            self.window.nodelay(True)
            self._hide_cursor()
            self._init_colors()
        except curses.error as e:
            self.close()
            raise RuntimeError(f"Could not configure the terminal: {e}") from e

        logger.info("Terminal session started (%dx%d)", *self.size())
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor; the game still works
            logger.warning("Terminal does not support hiding the cursor")

    def _init_colors(self) -> None:
        if not curses.has_colors():
            logger.info("Terminal has no color support, drawing in monochrome")
            return
        curses.start_color()
        curses.init_pair(SNAKE_PAIR, curses.COLOR_BLACK, curses.COLOR_GREEN)
        curses.init_pair(FOOD_PAIR, curses.COLOR_GREEN, curses.COLOR_RED)

    def size(self) -> Tuple[int, int]:
        """Return the terminal size as (width, height) in cells."""
        rows, cols = self.window.getmaxyx()
        return cols, rows

    def close(self) -> None:
        if self.window is None:
            return
        self.window.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.window = None
        logger.info("Terminal session closed")
