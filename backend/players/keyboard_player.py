"""
Keyboard player - reads key presses from a curses window.
"""

import curses
import logging
from typing import Dict, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, PAUSE, OTHER
from .base import Player

logger = logging.getLogger(__name__)

ARROWS = "arrows"
WSAD = "wsad"
KEY_SCHEMES = (ARROWS, WSAD)


def _letter_bindings(letter: str, key_press: str) -> Dict[int, str]:
    return {ord(letter.lower()): key_press, ord(letter.upper()): key_press}


def create_keybinds(scheme: str = ARROWS) -> Dict[int, str]:
    """
    Build the key code -> key press table for a movement scheme.

    Quit ('q') and pause ('p') are bound in every scheme. Letters are
    matched case-insensitively.
    """
    keybinds: Dict[int, str] = {}
    keybinds.update(_letter_bindings("q", QUIT))
    keybinds.update(_letter_bindings("p", PAUSE))

    if scheme == ARROWS:
        keybinds.update({
            curses.KEY_UP: UP,
            curses.KEY_DOWN: DOWN,
            curses.KEY_LEFT: LEFT,
            curses.KEY_RIGHT: RIGHT,
        })
    elif scheme == WSAD:
        keybinds.update(_letter_bindings("w", UP))
        keybinds.update(_letter_bindings("s", DOWN))
        keybinds.update(_letter_bindings("a", LEFT))
        keybinds.update(_letter_bindings("d", RIGHT))
    else:
        raise ValueError(
            f"Unknown movement key scheme '{scheme}'. Available schemes: {', '.join(KEY_SCHEMES)}"
        )
    return keybinds


class KeyboardPlayer(Player):
    """
    Reads the terminal's pending key presses without blocking.

    The window must be in no-delay mode so getch() returns -1 when the
    input buffer is empty. Only the latest key since the previous poll
    is reported.
    """

    def __init__(self, window, scheme: str = ARROWS):
        self.window = window
        self.scheme = scheme
        self.keybinds = create_keybinds(scheme)

    def _read_latest(self) -> Optional[int]:
        latest = None
        while True:
            key = self.window.getch()
            if key == -1:
                return latest
            latest = key

    def poll(self) -> Optional[str]:
        key = self._read_latest()
        if key is None:
            return None
        return self.keybinds.get(key, OTHER)

    def flush(self) -> None:
        dropped = self._read_latest()
        if dropped is not None:
            logger.debug("Discarded buffered input (last key %s)", dropped)
