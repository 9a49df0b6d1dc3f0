"""
GameState enum - the phases the game loop moves through.
"""

from enum import Enum


class GameState(Enum):
    """
    Exactly one state is active at a time.

    PRE_GAME -> IN_PROGRESS on pause key, QUIT on quit key
    IN_PROGRESS -> GAME_OVER_TRANSITION when the snake dies or fills the board
    GAME_OVER_TRANSITION -> GAME_OVER after the banner animation
    GAME_OVER -> RESTART_REQUESTED on pause key, QUIT on quit key
    RESTART_REQUESTED -> IN_PROGRESS with a fresh game instance
    """
    PRE_GAME = "pre_game"
    IN_PROGRESS = "in_progress"
    GAME_OVER_TRANSITION = "game_over_transition"
    GAME_OVER = "game_over"
    RESTART_REQUESTED = "restart_requested"
    QUIT = "quit"
