#!/usr/bin/env python3
"""
Terminal snake game.

Usage:
    python main.py
    python main.py --grid-size large --speed moderate --movement-key-scheme wsad

Controls:
    arrow keys (or w/a/s/d)  steer
    p                        start / pause / play again
    q                        quit
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, Dict, Optional, Set, Tuple

from config import GRID_SIZES, SPEEDS, Settings, load_settings
from domain.constants import (
    QUIT, PAUSE, VALID_MOVES,
    PAUSE_POLL_MS, GAME_OVER_BLINKS, GAME_OVER_BLINK_MS,
)
from domain.game_instance import GameInstance, TickResult
from domain.game_state import GameState
from domain.grid import Grid
from players.base import Player
from players.demo_player import DemoPlayer
from players.keyboard_player import KeyboardPlayer, KEY_SCHEMES
from services.terminal_output import TerminalOutput
from services.terminal_session import TerminalSession

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

TITLE = "SNAKE"
PRE_GAME_PROMPT = "Press 'p' to play, press 'q' to quit"
PAUSED_MESSAGE = "PAUSED"
GAME_OVER_BANNER = "GAME OVER"
WIN_BANNER = "YOU WIN"
GAME_OVER_MESSAGE = "Game over! You reached a snake length of {length}! Would you like to play again?"
WIN_MESSAGE = "You filled the board with a snake length of {length}! Would you like to play again?"
PLAY_AGAIN_PROMPT = "Press 'p' to play again, press 'q' to quit"


class SnakeGame:
    """
    Manages:
      - The game state machine (pre-game, playing, game over, restart, quit)
      - The current game instance (grid, snake, food, heading)
      - The attract-mode demo shown before the first game
      - Pacing: one tick, then sleep for the tick duration

    Collaborators are injected so the machine can be driven without a
    real terminal:
      player: input source, polled once per tick
      output: renderer (clear/draw_*/flush/reset)
      terminal_size: callable returning the current (width, height)
      sleep: callable taking seconds
    """

    def __init__(
        self,
        player: Player,
        output,
        terminal_size: Callable[[], Tuple[int, int]],
        playable_fraction: float = GRID_SIZES["small"],
        base_speed_ms: int = SPEEDS["high"],
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None
    ):
        self.player = player
        self.output = output
        self.terminal_size = terminal_size
        self.playable_fraction = playable_fraction
        self.base_speed_ms = base_speed_ms
        self.sleep = sleep
        self.rng = rng or random.Random()

        self.state = GameState.PRE_GAME
        self.instance: Optional[GameInstance] = None
        self.demo: Optional[GameInstance] = None
        self.demo_player: Optional[DemoPlayer] = None
        self.games_played = 0

        self._handlers: Dict[GameState, Callable[[], GameState]] = {
            GameState.PRE_GAME: self._pre_game,
            GameState.IN_PROGRESS: self._in_progress,
            GameState.GAME_OVER_TRANSITION: self._game_over_transition,
            GameState.GAME_OVER: self._game_over,
            GameState.RESTART_REQUESTED: self._restart,
            GameState.QUIT: lambda: GameState.QUIT,
        }

    # -------------------------------
    # State machine
    # -------------------------------

    def step(self) -> GameState:
        """Run the handler for the current state and move to the state it returns."""
        next_state = self._handlers[self.state]()
        if next_state != self.state:
            logger.debug("State %s -> %s", self.state.name, next_state.name)
        self.state = next_state
        return next_state

    def run(self) -> Optional[int]:
        """
        Drive the state machine until the player quits.

        The terminal is always handed back in a clean state, even when a
        handler raises. Returns the length of the last snake played, if any.
        """
        try:
            while self.state != GameState.QUIT:
                self.step()
        finally:
            self.output.reset()
        logger.info("Quit after %d game(s)", self.games_played)
        return self.instance.score if self.instance else None

    def _pre_game(self) -> GameState:
        key = self.player.poll()
        if key == QUIT:
            return GameState.QUIT
        if key == PAUSE:
            self.demo = None
            self.demo_player = None
            self.start_new_game()
            return GameState.IN_PROGRESS

        if self.demo is None:
            self._start_demo()
        else:
            self._demo_tick()
        self.output.draw_banner([TITLE, "", PRE_GAME_PROMPT])
        self.output.flush()
        self._sleep_ms(self.demo.tick_duration_ms(self.base_speed_ms))
        return GameState.PRE_GAME

    def _in_progress(self) -> GameState:
        key = self.player.poll()
        if key == QUIT:
            return GameState.QUIT
        if key == PAUSE:
            if self._pause() == QUIT:
                return GameState.QUIT
        elif key in VALID_MOVES:
            self.instance.change_direction(key)

        result = self.instance.game_cycle()
        if not result.alive or result.won:
            self._log_game_end(result)
            return GameState.GAME_OVER_TRANSITION

        self._draw_tick(self.instance, result)
        self.output.flush()
        self._sleep_ms(self.instance.tick_duration_ms(self.base_speed_ms))
        return GameState.IN_PROGRESS

    def _game_over_transition(self) -> GameState:
        banner = WIN_BANNER if self.instance.won else GAME_OVER_BANNER
        for _ in range(GAME_OVER_BLINKS):
            self.output.clear()
            self.output.draw_banner([banner])
            self.output.flush()
            self._sleep_ms(GAME_OVER_BLINK_MS)
            self._draw_board(self.instance)
            self.output.flush()
            self._sleep_ms(GAME_OVER_BLINK_MS)
        return GameState.GAME_OVER

    def _game_over(self) -> GameState:
        # Drop keys mashed around the moment of death
        self.player.flush()

        template = WIN_MESSAGE if self.instance.won else GAME_OVER_MESSAGE
        self.output.clear()
        self.output.draw_message(template.format(length=self.instance.score), (1, 1))
        self.output.draw_message(PLAY_AGAIN_PROMPT, (1, 2))
        self.output.flush()

        key = self._wait_for_key({PAUSE, QUIT})
        if key == QUIT:
            return GameState.QUIT
        return GameState.RESTART_REQUESTED

    def _restart(self) -> GameState:
        self.start_new_game()
        return GameState.IN_PROGRESS

    # -------------------------------
    # Helpers
    # -------------------------------

    def start_new_game(self) -> GameInstance:
        """Build a fresh instance for the current terminal size and draw it."""
        width, height = self.terminal_size()
        grid = Grid.from_terminal(width, height, self.playable_fraction)
        self.instance = GameInstance.new(grid, rng=self.rng)
        self.games_played += 1
        logger.info("Game %d started on %r", self.games_played, grid)
        self._draw_board(self.instance)
        self.output.flush()
        return self.instance

    def _start_demo(self) -> None:
        width, height = self.terminal_size()
        self.demo = GameInstance.welcome(width, height, rng=self.rng)
        self.demo_player = DemoPlayer(self.demo, rng=self.rng)
        self.output.clear()
        self.output.draw_food(self.demo.food)
        self.output.draw_snake(list(self.demo.snake.positions))

    def _demo_tick(self) -> None:
        move = self.demo_player.poll()
        if move is not None:
            self.demo.change_direction(move)
        result = self.demo.game_cycle()
        if not result.alive or result.won:
            # The demo never ends the pre-game screen; start it over
            self._start_demo()
            return
        self._draw_tick(self.demo, result)

    def _pause(self) -> str:
        self.output.draw_banner([PAUSED_MESSAGE])
        self.output.flush()
        key = self._wait_for_key({PAUSE, QUIT})
        if key == PAUSE:
            self._draw_board(self.instance)
            self.output.flush()
        return key

    def _wait_for_key(self, accepted: Set[str]) -> str:
        """Block, polling every 10 ms, until one of the accepted keys arrives."""
        while True:
            key = self.player.poll()
            if key in accepted:
                return key
            self._sleep_ms(PAUSE_POLL_MS)

    def _draw_board(self, instance: GameInstance) -> None:
        self.output.clear()
        self.output.draw_border(instance.grid)
        self.output.draw_food(instance.food)
        self.output.draw_snake(list(instance.snake.positions))

    def _draw_tick(self, instance: GameInstance, result: TickResult) -> None:
        if result.food_moved:
            self.output.draw_food(instance.food)
        self.output.draw_snake(list(instance.snake.positions), result.vacated_tail)

    def _log_game_end(self, result: TickResult) -> None:
        if result.won:
            logger.info("Board filled, snake length %d", self.instance.score)
        else:
            logger.info("Game over, snake length %d", self.instance.score)

    def _sleep_ms(self, milliseconds: int) -> None:
        self.sleep(milliseconds / 1000)


# -------------------------------
# Command line entry point
# -------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("-g", "--grid-size", choices=list(GRID_SIZES),
                        help="Share of the terminal used for the board (default: small)")
    parser.add_argument("-s", "--speed", choices=list(SPEEDS),
                        help="Game speed (default: high)")
    parser.add_argument("-m", "--movement-key-scheme", choices=list(KEY_SCHEMES),
                        help="Keys used to steer the snake (default: arrows)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def configure_logging(settings: Settings) -> None:
    # The screen belongs to curses, so log to a file
    logging.basicConfig(
        filename=settings.log_file,
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def play(settings: Settings) -> int:
    """Open the terminal, check it is big enough and run the game."""
    with TerminalSession() as session:
        width, height = session.size()
        # Fail fast on a terminal that cannot hold the board
        Grid.from_terminal(width, height, settings.playable_fraction)

        game = SnakeGame(
            player=KeyboardPlayer(session.window, settings.movement_key_scheme),
            output=TerminalOutput(session.window),
            terminal_size=session.size,
            playable_fraction=settings.playable_fraction,
            base_speed_ms=settings.base_speed_ms,
        )
        game.run()
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(
            grid_size=args.grid_size,
            speed=args.speed,
            movement_key_scheme=args.movement_key_scheme,
        )
        configure_logging(settings)
    except ValueError as e:
        print(f"snake: {e}", file=sys.stderr)
        return 1

    logger.info("Starting with %s", settings)

    try:
        return play(settings)
    except (ValueError, RuntimeError) as e:
        logger.error("Could not start the game: %s", e)
        print(f"snake: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0


if __name__ == "__main__":
    sys.exit(main())
