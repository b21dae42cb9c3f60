"""Text rendering for boards, games and playout statistics.

Every local board renders as a box 13 characters wide and 7 lines tall,
so the meta board and the statistics grid are just 3x3 arrangements of
boxes placed side by side.

    ┌───────────┐
    │ O │ X │   │
    │───┼───┼───│
    │   │ O │ X │
    │───┼───┼───│
    │ X │ X │   │
    └───────────┘
"""

from __future__ import annotations

from typing import List

from .ai.playout_stats import MegaBoardStats
from .board_manager import BOARD_SIZE, LocalBoard, MetaBoard
from .game_engine import Game
from .models import Square

__all__ = [
    "BOX_HEIGHT",
    "BOX_WIDTH",
    "render_game",
    "render_local_board",
    "render_meta_board",
    "render_stats",
]

BOX_WIDTH = 13
BOX_HEIGHT = 7

_TOP = "┌───────────┐"
_SEPARATOR = "│───┼───┼───│"
_BOTTOM = "└───────────┘"

_WON_O = (
    "┌── ██████╗ ┐",
    "│ ██╔═══██╗ │",
    "│ ██║   ██║ │",
    "│ ██║   ██║ │",
    "│ ╚██████╔╝ │",
    "│  ╚═════╝  │",
    "└───────────┘",
)

_WON_X = (
    "┌─ ██╗  ██╗ ┐",
    "│  ╚██╗██╔╝ │",
    "│   ╚███╔╝  │",
    "│   ██╔██╗  │",
    "│  ██╔╝ ██╗ │",
    "│  ╚═╝  ╚═╝ │",
    "└───────────┘",
)


def _box(rows: List[List[str]]) -> List[str]:
    lines = [_TOP]
    for i, (a, b, c) in enumerate(rows):
        lines.append(f"│{a}│{b}│{c}│")
        if i < 2:
            lines.append(_SEPARATOR)
    lines.append(_BOTTOM)
    return lines


def _local_board_lines(board: LocalBoard) -> List[str]:
    if board.winner is Square.O:
        return list(_WON_O)
    if board.winner is Square.X:
        return list(_WON_X)
    cells = board.cells
    return _box([
        [f" {cells[3 * row + col].symbol} " for col in range(3)]
        for row in range(3)
    ])


def _join_grid(boxes: List[List[str]]) -> str:
    out = []
    for grid_row in range(3):
        row_boxes = boxes[3 * grid_row:3 * grid_row + 3]
        for line in range(BOX_HEIGHT):
            out.append("".join(box[line] for box in row_boxes))
    return "\n".join(out) + "\n"


def render_local_board(board: LocalBoard) -> str:
    """Render one local board; a won board shows a large O or X."""
    return "\n".join(_local_board_lines(board)) + "\n"


def render_meta_board(meta: MetaBoard) -> str:
    """Render all nine local boards as a 3x3 grid of boxes."""
    return _join_grid([_local_board_lines(meta.board(i)) for i in range(BOARD_SIZE)])


def render_game(game: Game) -> str:
    """Render the meta board followed by whose turn it is."""
    return render_meta_board(game.meta_board) + f"{game.current_player.symbol}'s turn\n"


def _percentage(wins: int, runs: int) -> str:
    # Win percentage over all runs, trimmed to fit a 3-wide cell (".5", "12.").
    text = f"{wins / runs * 100:.1f}".lstrip("0")
    return text[:3]


def render_stats(stats: MegaBoardStats) -> str:
    """Render per-cell win percentages (wins / runs) for every board."""
    runs = stats.runs or 1
    boxes = []
    for board in range(BOARD_SIZE):
        boxes.append(_box([
            [f"{_percentage(int(stats.wins[board, 3 * row + col]), runs):>3}" for col in range(3)]
            for row in range(3)
        ]))
    return _join_grid(boxes)
