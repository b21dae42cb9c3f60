"""Tests for text rendering."""

from ultimate_ttt.ai.playout_stats import MegaBoardStats, PlayoutOutcome
from ultimate_ttt.board_manager import LocalBoard, MetaBoard
from ultimate_ttt.display import (
    BOX_HEIGHT,
    BOX_WIDTH,
    render_game,
    render_local_board,
    render_meta_board,
    render_stats,
)
from ultimate_ttt.models import Square

from tests.helpers import play_all


class TestRenderLocalBoard:
    """Tests for a single board box."""

    def test_empty_board(self) -> None:
        expected = (
            "┌───────────┐\n"
            "│   │   │   │\n"
            "│───┼───┼───│\n"
            "│   │   │   │\n"
            "│───┼───┼───│\n"
            "│   │   │   │\n"
            "└───────────┘\n"
        )
        assert render_local_board(LocalBoard()) == expected

    def test_cells_in_row_major_order(self) -> None:
        board = LocalBoard()
        board.apply(0, Square.O)
        board.apply(1, Square.X)
        board.apply(5, Square.X)
        lines = render_local_board(board).splitlines()
        assert lines[1] == "│ O │ X │   │"
        assert lines[3] == "│   │   │ X │"

    def test_won_board_uses_art(self) -> None:
        board = LocalBoard()
        for cell in (2, 4, 6):
            board.apply(cell, Square.X)
        lines = render_local_board(board).splitlines()
        assert len(lines) == BOX_HEIGHT
        assert all(len(line) == BOX_WIDTH for line in lines)
        assert "██" in lines[0]
        assert render_local_board(board) != render_local_board(LocalBoard())

    def test_won_o_and_x_differ(self) -> None:
        o_board, x_board = LocalBoard(), LocalBoard()
        for cell in (0, 1, 2):
            o_board.apply(cell, Square.O)
            x_board.apply(cell, Square.X)
        assert render_local_board(o_board) != render_local_board(x_board)


class TestRenderMetaBoard:
    """Tests for the 3x3 arrangement of boxes."""

    def test_dimensions(self) -> None:
        meta = MetaBoard()
        for cell in (0, 1, 2):
            meta.apply(4, cell, Square.O)
        lines = render_meta_board(meta).splitlines()
        assert len(lines) == 3 * BOX_HEIGHT
        assert all(len(line) == 3 * BOX_WIDTH for line in lines)

    def test_board_placement(self) -> None:
        meta = MetaBoard()
        meta.apply(5, 0, Square.X)
        lines = render_meta_board(meta).splitlines()
        # Board 5 is the right-hand box of the middle band.
        assert lines[BOX_HEIGHT + 1][2 * BOX_WIDTH:] == "│ X │   │   │"

    def test_render_game_shows_turn(self, game) -> None:
        assert render_game(game).endswith("O's turn\n")
        play_all(game, [(0, 0)])
        assert render_game(game).endswith("X's turn\n")


class TestRenderStats:
    """Tests for the win-percentage grid."""

    def test_percentages(self) -> None:
        stats = MegaBoardStats()
        stats.record(0, 0, PlayoutOutcome.WIN)
        stats.record(0, 1, PlayoutOutcome.WIN)
        stats.record(0, 1, PlayoutOutcome.LOSS)
        stats.record(0, 2, PlayoutOutcome.DRAW)
        lines = render_stats(stats).splitlines()
        # 1/4 and 1/4 wins of all runs; unexplored cells show ".0".
        assert lines[1].startswith("│25.│25.│ .0│")
        assert lines[3].startswith("│ .0│ .0│ .0│")

    def test_all_wins_is_100(self) -> None:
        stats = MegaBoardStats()
        stats.record(8, 8, PlayoutOutcome.WIN)
        lines = render_stats(stats).splitlines()
        assert lines[-2].endswith("│ .0│ .0│100│")

    def test_empty_stats_render(self) -> None:
        lines = render_stats(MegaBoardStats()).splitlines()
        assert len(lines) == 3 * BOX_HEIGHT
        assert all(len(line) == 3 * BOX_WIDTH for line in lines)
