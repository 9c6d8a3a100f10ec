"""
Text rendering of a game board.

Example (3x3, nothing opened)::

      0 1 2
    0 * * *
    1 * * *
    2 * * *

With ``reveal_holes`` set, every black hole shows as ``H``.
"""
from typing import List

from .cell import Cell
from .engine import GameState


CLOSED_MARKER = "*"
HOLE_MARKER = "H"


def cell_symbol(cell: Cell, reveal_holes: bool = False) -> str:
    """Get the display symbol for a single cell."""
    if cell.has_hole and (cell.is_open or reveal_holes):
        return HOLE_MARKER
    if cell.is_open:
        return str(cell.adjacent_holes)
    return CLOSED_MARKER


def render_board(state: GameState, reveal_holes: bool = False) -> str:
    """
    Render the board as text with row and column index labels.

    Args:
        state: Game to render. Not modified.
        reveal_holes: Show every black hole, open or not.

    Returns:
        Multi-line string, one line per row plus a header line.
    """
    board = state.board
    width = len(str(board.size - 1))

    lines: List[str] = []
    header = " ".join(f"{col:>{width}}" for col in range(board.size))
    lines.append(" " * width + " " + header)

    for row in range(board.size):
        symbols = " ".join(
            f"{cell_symbol(board.cell(row, col), reveal_holes):>{width}}"
            for col in range(board.size)
        )
        lines.append(f"{row:>{width}} {symbols}")

    return "\n".join(lines)
