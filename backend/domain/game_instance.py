"""
GameInstance - one game attempt: grid, snake, food and heading.

The per-tick simulation lives here; sequencing ticks against the clock
and the keyboard is the job of main.SnakeGame.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import START_DIRECTION, VERTICAL_SLOWDOWN_MS, is_vertical
from .food import place_food
from .grid import Grid, GridCell
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """
    Outcome of one simulation tick.

    Attributes:
        alive: False if the snake ran into itself this tick
        vacated_tail: cell the tail left behind, or None if the snake grew
        food_moved: True if food was eaten and re-placed
        won: True if the snake ate and no free cell is left for new food
    """
    alive: bool
    vacated_tail: Optional[GridCell] = None
    food_moved: bool = False
    won: bool = False


class GameInstance:
    """
    Holds the state of a single game attempt.

    Attributes:
        grid: the playable rectangle
        snake: the player's snake
        food: current food cell, None once the board is full
        direction: current heading
        rng: random source used for food placement
    """

    def __init__(
        self,
        grid: Grid,
        snake: Snake,
        food: Optional[GridCell] = None,
        direction: str = START_DIRECTION,
        rng: Optional[random.Random] = None
    ):
        self.grid = grid
        self.snake = snake
        self.direction = direction
        self.rng = rng or random.Random()
        self.won = False
        if food is None:
            food = place_food(grid.cells(), snake, self.rng)
        self.food = food

    @classmethod
    def new(cls, grid: Grid, rng: Optional[random.Random] = None) -> "GameInstance":
        """Start a game: centred snake heading left, food on a random free cell."""
        return cls(grid, Snake.spawn(grid), rng=rng)

    @classmethod
    def welcome(
        cls,
        terminal_width: int,
        terminal_height: int,
        rng: Optional[random.Random] = None
    ) -> "GameInstance":
        """
        Build the attract-mode instance shown before the first game.

        It spans the whole terminal and runs its snake in the lower half,
        clear of the title banner.
        """
        grid = Grid.from_terminal(terminal_width, terminal_height, 1.0)
        row = (grid.y_max + grid.y_max // 2) // 2
        return cls(grid, Snake.spawn(grid, row=row), rng=rng)

    @property
    def score(self) -> int:
        return len(self.snake)

    def change_direction(self, requested: str) -> bool:
        """
        Turn the snake if the request is a 90 degree turn.

        Requests on the current axis (including a reversal into the neck)
        are ignored. Returns True if the heading changed.
        """
        if is_vertical(requested) == is_vertical(self.direction):
            return False
        logger.debug("Direction %s -> %s", self.direction, requested)
        self.direction = requested
        return True

    def tick_duration_ms(self, base_speed_ms: int) -> int:
        """Sleep after a tick; vertical travel is slowed to look uniform on screen."""
        if is_vertical(self.direction):
            return base_speed_ms + VERTICAL_SLOWDOWN_MS
        return base_speed_ms

    def game_cycle(self) -> TickResult:
        """
        Advance the simulation by one tick.

          1) Move the head one cell, wrapping at the edges
          2) Pop the tail (held as vacated)
          3) Self-collision ends the game, even if the head landed on food
          4) Eating restores the vacated tail and re-places the food
        """
        new_head = self.grid.next_cell(self.snake.head, self.direction)
        vacated = self.snake.advance(new_head)

        if self.snake.has_self_collision():
            return TickResult(alive=False, vacated_tail=vacated)

        if new_head == self.food:
            self.snake.grow_from_vacated_tail()
            self.food = place_food(self.grid.cells(), self.snake, self.rng)
            if self.food is None:
                self.won = True
            return TickResult(alive=True, food_moved=True, won=self.won)

        return TickResult(alive=True, vacated_tail=vacated)

    def __repr__(self):
        return (
            f"<GameInstance {self.grid!r}, snake={len(self.snake)}, "
            f"food={self.food}, direction={self.direction}>"
        )
