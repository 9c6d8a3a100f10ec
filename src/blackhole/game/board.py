"""
Board module for the black hole game.

Implements the square grid of cells, neighbor enumeration and
bounds checks. Game rules live in the engine; the board only
stores cells and answers questions about positions.
"""
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Square grid of cells, ``size`` rows by ``size`` columns.

    Cells are owned by the board and handed out by reference so the
    engine can mutate them in place.
    """

    def __init__(self, size: int) -> None:
        """
        Create a grid of closed, hole-free cells.

        Args:
            size: Number of rows (and columns). Must be positive.
        """
        if size < 1:
            raise ValueError("Board size must be positive")
        self.size = size
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(size)] for _ in range(size)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Rows are scanned top to bottom and columns left to right, so an
        interior cell yields NW, N, NE, W, E, SW, S, SE.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position known to be on the board."""
        return self._grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def count_adjacent_holes(self, row: int, col: int) -> int:
        """Count holes around a position by inspecting its neighbors."""
        return sum(
            1 for n_row, n_col in self.get_neighbors(row, col)
            if self._grid[n_row][n_col].has_hole
        )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array for agents.

        Returns:
            2D int8 array where:
                -1 = closed
                0-8 = open with adjacent hole count
                9 = open black hole
        """
        obs = np.empty((self.size, self.size), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_closed_positions(self) -> List[Position]:
        """
        Get positions of cells that are still closed.

        Returns:
            List of (row, col) positions that can still be opened.
        """
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_closed
        ]
