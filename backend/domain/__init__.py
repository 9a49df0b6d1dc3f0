"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (raw mode, escape sequences, key decoding).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    QUIT, PAUSE, OTHER,
    INIT_SNAKE_SIZE,
    is_vertical,
)
from .grid import Grid, GridCell
from .snake import Snake
from .food import place_food, free_cells
from .game_instance import GameInstance, TickResult
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'QUIT', 'PAUSE', 'OTHER',
    'INIT_SNAKE_SIZE',
    'is_vertical',
    'Grid', 'GridCell',
    'Snake',
    'place_food', 'free_cells',
    'GameInstance', 'TickResult',
    'GameState',
]
