"""
Player implementations for the terminal snake game.

This module contains the input-source abstraction and the
implementations that decide where the snake goes next.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, create_keybinds, KEY_SCHEMES, ARROWS, WSAD
from .demo_player import DemoPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'create_keybinds',
    'KEY_SCHEMES',
    'ARROWS',
    'WSAD',
    'DemoPlayer',
]
