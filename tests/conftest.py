"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blackhole.game import Cell, GameConfig, GameState, create_game


# ============================================================================
# Hole Layout Helpers
# ============================================================================

class ScriptedRng:
    """Random source that yields a fixed sequence of linear indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        self._indices = iter(indices)

    def integers(self, high: int) -> int:
        index = next(self._indices)
        assert 0 <= index < high
        return index


def plant(size: int, holes: List[Tuple[int, int]]) -> GameState:
    """Create a game whose holes sit exactly at the given positions."""
    game = create_game(size, len(holes))
    game.place_holes(ScriptedRng(row * size + col for row, col in holes))
    return game


@pytest.fixture
def planted_game() -> Callable[[int, List[Tuple[int, int]]], GameState]:
    """Factory for games with a known hole layout."""
    return plant


@pytest.fixture
def scripted_rng() -> type:
    """Random source class replaying fixed indices."""
    return ScriptedRng


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def new_game() -> GameState:
    """Create an 8x8 game with 8 holes, before placement."""
    return create_game(8, 8)


@pytest.fixture
def seeded_game() -> GameState:
    """Create an 8x8 game with 8 holes placed from a fixed seed."""
    game = create_game(8, 8)
    game.place_holes(np.random.default_rng(1234))
    return game


@pytest.fixture
def corner_hole_game() -> GameState:
    """3x3 game with one hole in the bottom-right corner."""
    return plant(3, [(2, 2)])


@pytest.fixture
def two_hole_game() -> GameState:
    """4x4 game with holes at (0, 3) and (3, 3)."""
    return plant(4, [(0, 3), (3, 3)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed cell."""
    return Cell()


@pytest.fixture
def hole_cell() -> Cell:
    """Create a cell containing a black hole."""
    return Cell(has_hole=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(8, 8)
