"""Tests for RandomAI."""

from ultimate_ttt.ai.random_ai import RandomAI
from ultimate_ttt.game_engine import Game
from ultimate_ttt.models import AIConfig

from tests.helpers import JUMP_TO_DECIDED_BOARD, play_all, snapshot


class TestRandomAI:
    """Tests for the uniform-random baseline."""

    def test_move_is_legal(self, game) -> None:
        ai = RandomAI(AIConfig(rng_seed=1))
        for _ in range(40):
            if not game.is_playable():
                break
            move = ai.choose(game)
            assert move in game.legal_moves_for_current_player()
            game.play(*move)

    def test_respects_mandated_board(self, game) -> None:
        game.play(0, 6)
        ai = RandomAI(AIConfig(rng_seed=3))
        for _ in range(20):
            assert ai.choose(game)[0] == 6

    def test_free_choice_avoids_decided_boards(self, game) -> None:
        play_all(game, JUMP_TO_DECIDED_BOARD)
        ai = RandomAI(AIConfig(rng_seed=5))
        for _ in range(50):
            assert ai.choose(game)[0] != 0

    def test_same_seed_same_moves(self) -> None:
        def play_out(seed):
            g = Game()
            ai = RandomAI(AIConfig(rng_seed=seed))
            moves = []
            while g.is_playable():
                move = ai.choose(g)
                moves.append(move)
                g.play(*move)
            return moves

        assert play_out(17) == play_out(17)

    def test_does_not_mutate_game(self, game) -> None:
        game.play(4, 4)
        before = snapshot(game)
        RandomAI(AIConfig(rng_seed=2)).choose(game)
        assert snapshot(game) == before

    def test_decided_game_returns_none(self, finished_game) -> None:
        ai = RandomAI()
        assert ai.choose(finished_game) is None
        assert ai.move_count == 0

    def test_move_count(self, game) -> None:
        ai = RandomAI(AIConfig(rng_seed=0))
        ai.choose(game)
        ai.choose(game)
        assert ai.move_count == 2
