"""
Game constants for the terminal snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}
VERTICAL_MOVES = {UP, DOWN}

# Non-directional key presses reported by input sources
QUIT = "QUIT"
PAUSE = "PAUSE"
OTHER = "OTHER"

# Game settings
INIT_SNAKE_SIZE = 5
START_DIRECTION = LEFT

# Terminal cells are taller than wide, so vertical steps are slowed down
VERTICAL_SLOWDOWN_MS = 20
PAUSE_POLL_MS = 10
GAME_OVER_BLINKS = 3
GAME_OVER_BLINK_MS = 500

# Grid layout
TERM_MIN_COORD = 2.0
MIN_TERMINAL_SIZE = 10


def is_vertical(direction: str) -> bool:
    """Return True for UP/DOWN, False for LEFT/RIGHT."""
    if direction not in VALID_MOVES:
        raise ValueError(f"Unknown direction '{direction}'")
    return direction in VERTICAL_MOVES
