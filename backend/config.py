"""
Settings for the terminal snake game.

Values are resolved in this order: command-line flag, environment
variable (a .env file is honored), built-in default.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

from players.keyboard_player import KEY_SCHEMES, ARROWS

GRID_SIZES: Dict[str, float] = {
    "small": 0.7,
    "medium": 0.85,
    "large": 1.0,
}

SPEEDS: Dict[str, int] = {
    "slow": 120,
    "moderate": 90,
    "high": 60,
}

DEFAULT_GRID_SIZE = "small"
DEFAULT_SPEED = "high"
DEFAULT_KEY_SCHEME = ARROWS
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = "snake.log"


@dataclass
class Settings:
    """
    Resolved game settings.

    Attributes:
        grid_size: tier name, one of GRID_SIZES
        speed: tier name, one of SPEEDS
        movement_key_scheme: "arrows" or "wsad"
        log_level: logging level name
        log_file: path the log is written to (the screen belongs to the game)
    """
    grid_size: str = DEFAULT_GRID_SIZE
    speed: str = DEFAULT_SPEED
    movement_key_scheme: str = DEFAULT_KEY_SCHEME
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = DEFAULT_LOG_FILE

    @property
    def playable_fraction(self) -> float:
        return GRID_SIZES[self.grid_size]

    @property
    def base_speed_ms(self) -> int:
        return SPEEDS[self.speed]


def _env_choice(name: str, default: str, allowed) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    value = value.strip().lower()
    if value not in allowed:
        raise ValueError(
            f"Invalid {name}='{value}'. Allowed values: {', '.join(allowed)}"
        )
    return value


def load_settings(
    grid_size: Optional[str] = None,
    speed: Optional[str] = None,
    movement_key_scheme: Optional[str] = None,
    dotenv: bool = True
) -> Settings:
    """
    Build Settings from explicit values, falling back to the environment.

    Args:
        grid_size, speed, movement_key_scheme: values from the CLI, or None
        dotenv: load a .env file into the environment first

    Raises:
        ValueError: if an environment variable names an unknown tier
    """
    if dotenv:
        load_dotenv()

    return Settings(
        grid_size=grid_size or _env_choice("SNAKE_GRID_SIZE", DEFAULT_GRID_SIZE, GRID_SIZES),
        speed=speed or _env_choice("SNAKE_SPEED", DEFAULT_SPEED, SPEEDS),
        movement_key_scheme=movement_key_scheme or _env_choice(
            "SNAKE_KEY_SCHEME", DEFAULT_KEY_SCHEME, KEY_SCHEMES
        ),
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("SNAKE_LOG_FILE", DEFAULT_LOG_FILE),
    )
