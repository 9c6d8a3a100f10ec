"""
Unit tests for text rendering.
"""
from blackhole.game import GameState, create_game, render_board


class TestRenderBoard:
    """Test the board text view."""

    def test_new_board_is_all_closed(self) -> None:
        """Fresh boards show index labels and closed markers."""
        assert render_board(create_game(3, 1)) == (
            "  0 1 2\n"
            "0 * * *\n"
            "1 * * *\n"
            "2 * * *"
        )

    def test_open_cells_show_counts(self, two_hole_game: GameState) -> None:
        """Open cells show their adjacent hole count."""
        two_hole_game.reveal_cell(0, 0)
        assert render_board(two_hole_game).splitlines() == [
            "  0 1 2 3",
            "0 0 0 1 *",
            "1 0 0 1 *",
            "2 0 0 1 *",
            "3 0 0 1 *",
        ]

    def test_reveal_holes_marks_every_hole(
        self, corner_hole_game: GameState
    ) -> None:
        """Reveal mode shows holes even while closed."""
        assert render_board(corner_hole_game, reveal_holes=True).splitlines()[-1] == (
            "2 * * H"
        )

    def test_open_hole_always_shown(self, two_hole_game: GameState) -> None:
        """Holes opened by a loss show without reveal mode."""
        two_hole_game.reveal_cell(3, 3)
        lines = render_board(two_hole_game).splitlines()
        assert lines[1] == "0 * * * H"
        assert lines[4] == "3 * * * H"

    def test_render_does_not_modify_state(
        self, corner_hole_game: GameState
    ) -> None:
        """Rendering with reveal mode leaves cells closed."""
        render_board(corner_hole_game, reveal_holes=True)
        assert corner_hole_game.board.cell(2, 2).is_open is False

    def test_wide_board_stays_aligned(self) -> None:
        """Two-digit indices widen every column equally."""
        lines = render_board(create_game(11, 1)).splitlines()
        assert len({len(line) for line in lines}) == 1
        assert lines[0].endswith(" 9 10")
        assert lines[11].startswith("10  *")
