"""Shared helpers for ultimate tic-tac-toe tests."""

from typing import Iterable, List, Tuple

from ultimate_ttt.game_engine import Game


# X wins board 0 (the middle row 3-4-5), then X's last move in board 4
# sends O to the decided board 0.
JUMP_TO_DECIDED_BOARD: List[Tuple[int, int]] = [
    (0, 0), (0, 5), (5, 0), (0, 2),
    (2, 0), (0, 3), (3, 0), (0, 4),
    (4, 8), (8, 7), (7, 8), (8, 2),
    (2, 8), (8, 4), (4, 4), (4, 0),
]


class FakeClock:
    """Deterministic clock that advances ``step`` seconds per call."""

    def __init__(self, step: float = 1.0):
        self.step = step
        self.now = 0.0
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


def play_all(game: Game, moves: Iterable[Tuple[int, int]]) -> Game:
    for board, cell in moves:
        game.play(board, cell)
    return game


def snapshot(game: Game) -> tuple:
    """Everything observable about a game, for before/after comparisons."""
    meta = game.meta_board
    return (
        game.current_player,
        game.current_board,
        game.turn_count,
        game.winner,
        tuple(meta.legal_moves()),
        tuple(meta.board(i).cells for i in range(9)),
        tuple(tuple(meta.board(i).legal_moves()) for i in range(9)),
        tuple(meta.board_winners()),
    )
