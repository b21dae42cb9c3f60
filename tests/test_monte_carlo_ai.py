"""Tests for MonteCarloAI."""

import logging

import numpy as np
import pytest

from ultimate_ttt.ai.monte_carlo_ai import MonteCarloAI
from ultimate_ttt.errors import ConfigurationError, InvariantViolationError
from ultimate_ttt.game_engine import Game
from ultimate_ttt.models import AIConfig

from tests.helpers import FakeClock, play_all, snapshot


def make_ai(seed: int = 42, playouts: int = 20) -> MonteCarloAI:
    """An AI that runs exactly ``playouts`` iterations on a fake clock."""
    return MonteCarloAI(
        AIConfig(rng_seed=seed),
        time_limit=float(playouts),
        clock=FakeClock(),
    )


class TestBudget:
    """Tests for time budget resolution and enforcement."""

    def test_zero_budget_runs_one_playout(self, game) -> None:
        ai = MonteCarloAI(AIConfig(rng_seed=0), time_limit=0, clock=FakeClock())
        move = ai.choose(game)
        assert move in game.legal_moves_for_current_player()
        assert ai.last_results.runs == 1

    def test_zero_budget_real_clock(self, game) -> None:
        game.play(0, 3)
        ai = MonteCarloAI(AIConfig(rng_seed=9), time_limit=0)
        move = ai.choose(game)
        assert move in game.legal_moves_for_current_player()
        assert ai.last_results.runs >= 1

    def test_fake_clock_sets_playout_count(self, game) -> None:
        ai = make_ai(playouts=25)
        ai.choose(game)
        assert ai.last_results.runs == 25

    def test_think_time_from_config(self) -> None:
        ai = MonteCarloAI(AIConfig(think_time=250))
        assert ai.time_limit == 0.25

    def test_explicit_time_limit_wins(self) -> None:
        ai = MonteCarloAI(AIConfig(think_time=250), time_limit=2.0)
        assert ai.time_limit == 2.0

    def test_default_think_time(self, monkeypatch) -> None:
        from ultimate_ttt.config import get_config

        monkeypatch.setenv("UTTT_DEFAULT_THINK_TIME_MS", "300")
        get_config.cache_clear()
        try:
            assert MonteCarloAI().time_limit == 0.3
        finally:
            get_config.cache_clear()

    def test_negative_time_limit_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            MonteCarloAI(time_limit=-1)


class TestChoose:
    """Tests for move selection and statistics."""

    def test_same_seed_same_decision(self, game) -> None:
        game.play(4, 4)
        a, b = make_ai(seed=7), make_ai(seed=7)
        assert a.choose(game) == b.choose(game)
        assert a.last_results == b.last_results

    def test_returns_best_ratio(self, game) -> None:
        ai = make_ai(playouts=60)
        move = ai.choose(game)
        assert move == ai.last_results.best()
        ratios = ai.last_results.win_ratios()
        assert ratios[move] == ratios[ai.last_results.totals > 0].max()

    def test_stats_invariants(self, game) -> None:
        ai = make_ai(playouts=40)
        ai.choose(game)
        stats = ai.last_results
        assert int(stats.totals.sum()) == stats.runs == 40
        assert np.all(stats.wins + stats.losses <= stats.totals)

    def test_only_legal_first_moves_recorded(self, game) -> None:
        game.play(0, 2)
        ai = make_ai(playouts=30)
        ai.choose(game)
        legal = set(game.legal_moves_for_current_player())
        for key, _ in ai.last_results.candidates():
            assert key in legal

    def test_does_not_mutate_game(self, game) -> None:
        play_all(game, [(4, 0), (0, 4)])
        before = snapshot(game)
        make_ai().choose(game)
        assert snapshot(game) == before

    def test_decided_game_returns_none(self, finished_game) -> None:
        ai = make_ai()
        assert ai.choose(finished_game) is None
        assert ai.last_results is None
        assert ai.move_count == 0

    def test_debug_log(self, game, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="ultimate_ttt.ai.monte_carlo_ai"):
            make_ai(playouts=3).choose(game)
        assert "3 playouts" in caplog.text


class TestInvariantViolations:
    """A rejected simulated move is an engine bug, not a user error."""

    def test_rejected_candidate(self, game, monkeypatch) -> None:
        monkeypatch.setattr(Game, "legal_moves_for_current_player", lambda self: [(9, 9)])
        with pytest.raises(InvariantViolationError) as exc_info:
            make_ai().choose(game)
        assert exc_info.value.context["stage"] == "candidate"

    def test_no_candidate(self, game, monkeypatch) -> None:
        monkeypatch.setattr(Game, "legal_moves_for_current_player", lambda self: [])
        with pytest.raises(InvariantViolationError):
            make_ai().choose(game)
