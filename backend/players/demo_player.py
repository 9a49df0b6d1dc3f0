"""
Demo player - steers the attract-mode snake shown before the first game.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, is_vertical
from domain.game_instance import GameInstance
from .base import Player

TURN_CHANCE = 0.08


class DemoPlayer(Player):
    """
    An autopilot that occasionally makes a random 90 degree turn.

    Turns that would run straight into the snake's own body are avoided
    when another option exists.
    """

    def __init__(
        self,
        game_instance: GameInstance,
        rng: Optional[random.Random] = None,
        turn_chance: float = TURN_CHANCE
    ):
        self.game_instance = game_instance
        self.rng = rng or random.Random()
        self.turn_chance = turn_chance

    def poll(self) -> Optional[str]:
        if self.rng.random() >= self.turn_chance:
            return None

        instance = self.game_instance
        turns = [LEFT, RIGHT] if is_vertical(instance.direction) else [UP, DOWN]

        # Filter out turns whose next cell is already part of the body
        safe_turns: List[str] = []
        for move in turns:
            next_cell = instance.grid.next_cell(instance.snake.head, move)
            if next_cell in list(instance.snake.positions)[:-1]:
                continue
            safe_turns.append(move)

        if not safe_turns:
            return None
        return self.rng.choice(safe_turns)

    def flush(self) -> None:
        pass
