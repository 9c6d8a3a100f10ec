"""
Terminal driver for the black hole game.

Asks the player for settings and moves, forwards valid moves to the
engine and prints the board. Input and output are plain callables so
the loop can be driven by scripted input.
"""
import logging
from typing import Callable, Optional, Tuple

import numpy as np

from .game.engine import GameConfig, GameStatus, InvalidConfiguration, start_game
from .game.render import render_board


logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[..., None]


# ============================================================================
# Input Parsing
# ============================================================================

def parse_settings(size_text: str, holes_text: str) -> GameConfig:
    """
    Parse board size and black hole count entered by the player.

    Raises:
        InvalidConfiguration: If either value is not an integer or the
            pair is out of bounds.
    """
    try:
        size = int(size_text.strip())
        hole_count = int(holes_text.strip())
    except ValueError:
        raise InvalidConfiguration("Board size and black hole count must be numbers")
    return GameConfig(size, hole_count)


def parse_move(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a move of two integers separated by spaces or a comma.

    Raises:
        ValueError: If the text is malformed or the cell is off the board.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {text!r}")
    row, col = int(parts[0]), int(parts[1])
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Cell ({row}, {col}) is outside the board")
    return row, col


# ============================================================================
# Prompts
# ============================================================================

def prompt_settings(
    input_fn: InputFn = input,
    output: OutputFn = print,
    max_attempts: Optional[int] = None,
) -> GameConfig:
    """
    Ask for board size and black hole count until they are valid.

    Args:
        input_fn: Reads one line after showing a prompt.
        output: Prints a message.
        max_attempts: Give up after this many bad entries (None: never).

    Raises:
        InvalidConfiguration: If every allowed attempt was invalid.
    """
    attempts = 0
    while True:
        size_text = input_fn("Enter board size: ")
        holes_text = input_fn("Enter black holes count: ")
        try:
            return parse_settings(size_text, holes_text)
        except InvalidConfiguration as error:
            attempts += 1
            logger.debug("Rejected settings %r/%r: %s", size_text, holes_text, error)
            if max_attempts is not None and attempts >= max_attempts:
                raise
            output(f"Failed to start game. Error: {error}")
            output("Try again.")


def prompt_move(
    size: int,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> Optional[Tuple[int, int]]:
    """Ask for one move; returns None if the entry was invalid."""
    text = input_fn("Your move (row, col): ")
    try:
        return parse_move(text, size)
    except ValueError as error:
        logger.debug("Rejected move %r: %s", text, error)
        output("Invalid input! Try again.")
        return None


# ============================================================================
# Game Loop
# ============================================================================

def play(
    input_fn: InputFn = input,
    output: OutputFn = print,
    config: Optional[GameConfig] = None,
    rng: Optional[np.random.Generator] = None,
    max_attempts: Optional[int] = None,
) -> GameStatus:
    """
    Play one game in the terminal.

    Args:
        input_fn: Reads one line after showing a prompt.
        output: Prints a message.
        config: Settings to use instead of prompting for them.
        rng: Random source for hole placement.
        max_attempts: Limit on bad settings entries.

    Returns:
        Final status, WON or LOST.
    """
    output("Welcome to the black hole game!")
    output("Let's start the game.")
    output()

    if config is None:
        config = prompt_settings(input_fn, output, max_attempts)
    game = start_game(config.size, config.hole_count, rng)

    while game.is_playing:
        output("Current board:")
        output(render_board(game))
        output()

        move = prompt_move(config.size, input_fn, output)
        if move is not None:
            game.reveal_cell(*move)

    output(render_board(game, reveal_holes=True))
    output()
    if game.is_lost:
        output("You lost!")
    else:
        output("You win!")
    return game.status
