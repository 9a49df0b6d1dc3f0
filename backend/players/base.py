"""
Base input source interface for the game engine.
"""

from typing import Optional


class Player:
    """
    Base class/interface for whatever steers the snake.

    A player is polled once per tick and must never block: "no key
    pressed" is a normal answer.
    """

    def poll(self) -> Optional[str]:
        """
        Return the most recent pending key press, or None.

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "QUIT", "PAUSE", "OTHER",
            or None when nothing was pressed since the last poll.
        """
        raise NotImplementedError

    def flush(self) -> None:
        """Discard any buffered key presses."""
        while self.poll() is not None:
            pass
