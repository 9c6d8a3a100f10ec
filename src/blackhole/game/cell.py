"""
Cell module for the black hole game.

Represents a single grid position: whether it hides a black hole,
whether the player has opened it, and how many holes surround it.
"""
from dataclasses import dataclass


# Observation values shared with the board and environment
CLOSED = -1
OPEN_HOLE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        has_hole: Whether a black hole occupies this cell.
        is_open: Whether the player has opened this cell. Never reset.
        adjacent_holes: Count of holes in neighboring cells (0-8).
    """

    has_hole: bool = False
    is_open: bool = False
    adjacent_holes: int = 0

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was closed and is now open, False if it was
            already open.
        """
        if self.is_open:
            return False
        self.is_open = True
        return True

    @property
    def is_closed(self) -> bool:
        """Check if cell is still closed."""
        return not self.is_open

    def to_observation(self) -> int:
        """
        Convert cell to an observation value for agents.

        Returns:
            -1: Closed cell
            0-8: Open cell with adjacent hole count
            9: Open black hole (game over state)
        """
        if not self.is_open:
            return CLOSED
        if self.has_hole:
            return OPEN_HOLE
        return self.adjacent_holes
