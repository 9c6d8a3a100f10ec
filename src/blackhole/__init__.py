"""
Black hole game.

A Minesweeper-style puzzle played in the terminal: open every cell
that does not hide a black hole.
"""
from .game import (
    Board,
    Cell,
    GameConfig,
    GameState,
    GameStatus,
    InvalidConfiguration,
    create_game,
    render_board,
    start_game,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "GameConfig",
    "GameState",
    "GameStatus",
    "InvalidConfiguration",
    "create_game",
    "render_board",
    "start_game",
]
