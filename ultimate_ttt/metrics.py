"""Prometheus metrics for the ultimate tic-tac-toe service.

Counters and histograms live here so that /ai/move and the self-play loop
can record lightweight telemetry without managing their own metric
instances.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


AI_MOVE_REQUESTS: Final[Counter] = Counter(
    "uttt_ai_move_requests_total",
    "Total number of /ai/move requests, labeled by ai_type and outcome.",
    labelnames=("ai_type", "outcome"),
)

AI_MOVE_LATENCY: Final[Histogram] = Histogram(
    "uttt_ai_move_latency_seconds",
    "Latency of /ai/move requests in seconds, labeled by ai_type.",
    labelnames=("ai_type",),
    buckets=(
        0.01,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.0,
        5.0,
        10.0,
    ),
)

AI_PLAYOUTS: Final[Counter] = Counter(
    "uttt_ai_playouts_total",
    "Total Monte Carlo playouts run while serving /ai/move.",
)

SELFPLAY_GAMES: Final[Counter] = Counter(
    "uttt_selfplay_games_total",
    "Total completed self-play games, labeled by outcome (O, X or draw).",
    labelnames=("outcome",),
)
