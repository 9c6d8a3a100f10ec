"""
Game engine for the black hole game.

Owns the board, places black holes, opens cells (with flood fill
across empty regions) and tracks whether the game is won or lost.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .board import Board, Position


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class InvalidConfiguration(ValueError):
    """Raised when a board size or hole count is out of bounds."""


@dataclass
class GameConfig:
    """
    Configuration for a game.

    Attributes:
        size: Number of rows and columns of the square board.
        hole_count: Number of black holes to place.
    """

    size: int
    hole_count: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise InvalidConfiguration("Board size must be positive")
        if self.hole_count < 1:
            raise InvalidConfiguration("There must be at least one black hole")
        max_holes = self.size * self.size - 1
        if self.hole_count > max_holes:
            raise InvalidConfiguration(f"Too many black holes (max {max_holes})")

    @property
    def safe_cells(self) -> int:
        """Number of hole-free cells on the board."""
        return self.size * self.size - self.hole_count


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    A single game in progress.

    Created with an empty board; holes arrive through ``place_holes``
    and the board only changes afterwards through ``reveal_cell``.
    """

    config: GameConfig
    board: Board = field(init=False, repr=False)
    remaining_safe_cells: int = field(init=False)
    hole_locations: List[Position] = field(init=False, default_factory=list)
    _status: GameStatus = field(init=False, default=GameStatus.PLAYING)

    def __post_init__(self) -> None:
        """Build the empty board and the safe cell counter."""
        self.board = Board(self.config.size)
        self.remaining_safe_cells = self.config.safe_cells

    # ========================================================================
    # Hole Placement
    # ========================================================================

    def place_holes(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        Place black holes uniformly at random.

        Draws linear indices until ``hole_count`` distinct ones have been
        accepted. Must be called exactly once, before any reveal; calling
        it again places a second set of holes on top of the first.

        Args:
            rng: Random source. A fresh unseeded generator if omitted.
        """
        rng = rng if rng is not None else np.random.default_rng()
        size = self.config.size
        total_cells = self.board.total_cells
        placed = np.zeros(total_cells, dtype=bool)

        while len(self.hole_locations) < self.config.hole_count:
            index = int(rng.integers(total_cells))
            if placed[index]:
                continue
            placed[index] = True
            row, col = divmod(index, size)
            self._add_hole(row, col)

        logger.debug(
            "Placed %d black holes on %dx%d board",
            self.config.hole_count, size, size,
        )

    def _add_hole(self, row: int, col: int) -> None:
        """Mark a hole and bump the count of every neighbor."""
        self.board.cell(row, col).has_hole = True
        self.hole_locations.append((row, col))
        for n_row, n_col in self.board.get_neighbors(row, col):
            self.board.cell(n_row, n_col).adjacent_holes += 1

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> List[Position]:
        """
        Open the cell at the given position.

        Opening a hole loses the game and opens every hole. Opening a
        cell with no adjacent holes opens its neighborhood breadth-first
        until the region is bordered by numbered cells. The position must
        be on the board.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            Positions opened by this call, in the order they opened.
            Empty if the cell was already open or the game is over.
        """
        cell = self.board.cell(row, col)
        if cell.is_open or self._status != GameStatus.PLAYING:
            return []

        cell.open()
        opened = [(row, col)]

        if cell.has_hole:
            self._status = GameStatus.LOST
            opened.extend(self._reveal_all_holes())
            logger.info("Black hole opened at (%d, %d), game lost", row, col)
            return opened

        self.remaining_safe_cells -= 1
        if cell.adjacent_holes == 0:
            opened.extend(self._flood_fill(row, col))

        if self.remaining_safe_cells == 0:
            self._status = GameStatus.WON
            logger.info("All safe cells opened, game won")
        return opened

    def _flood_fill(self, row: int, col: int) -> List[Position]:
        """
        Open the region around an empty cell.

        The queue is not deduplicated; a position queued twice is
        skipped at dequeue time because it is already open.
        """
        opened = []
        queue = deque(self.board.get_neighbors(row, col))

        while queue:
            next_row, next_col = queue.popleft()
            cell = self.board.cell(next_row, next_col)
            if cell.is_open:
                continue

            cell.open()
            self.remaining_safe_cells -= 1
            opened.append((next_row, next_col))

            if cell.adjacent_holes == 0:
                queue.extend(self.board.get_neighbors(next_row, next_col))

        return opened

    def _reveal_all_holes(self) -> List[Position]:
        """Open every hole; returns the ones that were still closed."""
        return [
            (row, col) for row, col in self.hole_locations
            if self.board.cell(row, col).open()
        ]

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def size(self) -> int:
        """Get board size (rows and columns)."""
        return self.config.size

    @property
    def hole_count(self) -> int:
        """Get number of black holes."""
        return self.config.hole_count

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST


# ============================================================================
# Game Factories
# ============================================================================

def create_game(size: int, hole_count: int) -> GameState:
    """
    Create a game with an empty board.

    Raises:
        InvalidConfiguration: If the size is not positive, or the hole
            count is below one or leaves no safe cell.
    """
    return GameState(GameConfig(size, hole_count))


def start_game(
    size: int,
    hole_count: int,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    """Create a game and place its black holes."""
    game = create_game(size, hole_count)
    game.place_holes(rng)
    return game
