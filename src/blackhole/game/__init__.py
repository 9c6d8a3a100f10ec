"""
Black hole game module.

Provides the core game logic: cells, board, engine and text rendering.
"""
from .cell import Cell
from .board import Board, Position
from .engine import (
    GameConfig,
    GameState,
    GameStatus,
    InvalidConfiguration,
    create_game,
    start_game,
)
from .render import render_board
from .environment import BlackHoleEnv

__all__ = [
    "Cell",
    "Board",
    "Position",
    "GameConfig",
    "GameState",
    "GameStatus",
    "InvalidConfiguration",
    "create_game",
    "start_game",
    "render_board",
    "BlackHoleEnv",
]
