"""
Unit tests for Cell class.

Tests cell defaults, opening, and observation conversion.
"""
from blackhole.game import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_has_no_hole(self) -> None:
        """New cell should not hold a hole by default."""
        assert Cell().has_hole is False

    def test_default_cell_is_closed(self) -> None:
        """New cell should be closed by default."""
        cell = Cell()
        assert cell.is_open is False
        assert cell.is_closed is True

    def test_default_cell_has_zero_adjacent_holes(self) -> None:
        """New cell should have 0 adjacent holes by default."""
        assert Cell().adjacent_holes == 0


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_closed_cell_returns_true(self, closed_cell: Cell) -> None:
        """Opening a closed cell should succeed."""
        assert closed_cell.open() is True
        assert closed_cell.is_open is True

    def test_open_twice_returns_false(self, closed_cell: Cell) -> None:
        """Opening an open cell should report no change."""
        closed_cell.open()
        assert closed_cell.open() is False
        assert closed_cell.is_open is True

    def test_open_hole_cell(self, hole_cell: Cell) -> None:
        """Hole cells open like any other cell."""
        assert hole_cell.open() is True


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation value conversion."""

    def test_closed_cell_observation(self, closed_cell: Cell) -> None:
        """Closed cell should be -1."""
        assert closed_cell.to_observation() == -1

    def test_closed_hole_is_hidden(self, hole_cell: Cell) -> None:
        """A closed hole must not leak through the observation."""
        assert hole_cell.to_observation() == -1

    def test_open_cell_shows_count(self) -> None:
        """Open cell should show its adjacent hole count."""
        cell = Cell(adjacent_holes=4)
        cell.open()
        assert cell.to_observation() == 4

    def test_open_hole_observation(self, hole_cell: Cell) -> None:
        """Open hole should be 9."""
        hole_cell.open()
        assert hole_cell.to_observation() == 9
