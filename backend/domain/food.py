"""
Food placement.
"""

import logging
import random
from typing import Iterable, Optional

from .grid import GridCell
from .snake import Snake

logger = logging.getLogger(__name__)


def free_cells(cells: Iterable[GridCell], snake: Snake) -> list:
    """Return the cells not occupied by the snake body."""
    occupied = set(snake.positions)
    return [cell for cell in cells if cell not in occupied]


def place_food(
    cells: Iterable[GridCell],
    snake: Snake,
    rng: Optional[random.Random] = None
) -> Optional[GridCell]:
    """
    Pick a random cell, uniformly, among those the snake does not occupy.

    Args:
        cells: every playable cell (e.g. Grid.cells())
        snake: the snake whose body must be avoided
        rng: random source; the module-level generator is used when omitted

    Returns:
        The chosen cell, or None when the snake fills the whole grid.
    """
    candidates = free_cells(cells, snake)
    if not candidates:
        logger.info("No free cell left for food (snake length %d)", len(snake))
        return None

    rng = rng or random
    food = rng.choice(candidates)
    logger.debug("Placed food at %s (%d free cells)", food, len(candidates))
    return food
