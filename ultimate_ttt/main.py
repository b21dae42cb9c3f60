"""
Ultimate Tic-Tac-Toe AI Service - FastAPI Application
Provides AI move selection and game-state endpoints.

The service is stateless: every request carries the full move history,
which is replayed through the rules engine before anything else happens.
"""

import logging
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .ai.factory import create_ai
from .ai.monte_carlo_ai import MonteCarloAI
from .config import get_config
from .errors import RulesViolationError, UltimateTTTError
from .game_engine import Game
from .logging_config import setup_logging
from .metrics import AI_MOVE_LATENCY, AI_MOVE_REQUESTS, AI_PLAYOUTS
from .models import AIConfig, AIType, Move, Square

SERVICE_VERSION = "1.0.0"

# Configure logging
_config = get_config()
setup_logging(_config.log_level, json_logs=_config.json_logs)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Ultimate Tic-Tac-Toe AI Service",
    description="Monte Carlo move selection and rules evaluation for ultimate tic-tac-toe",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MoveRequest(BaseModel):
    """Request model for AI move selection"""
    moves: List[Move] = Field(default_factory=list)
    ai_type: AIType = AIType.MONTE_CARLO
    think_time: Optional[int] = Field(
        None,
        ge=0,
        alias="thinkTime",
        description="Monte Carlo budget in milliseconds",
    )
    seed: Optional[int] = Field(
        None,
        ge=0,
        le=0x7FFFFFFF,
        description="Optional RNG seed for deterministic AI behavior",
    )

    class Config:
        populate_by_name = True


class CandidateStats(BaseModel):
    """Playout counters for one explored first move"""
    board: int
    cell: int
    wins: int
    losses: int
    totals: int
    win_ratio: float


class MoveResponse(BaseModel):
    """Response model for AI move selection"""
    move: Optional[Move]
    player: Square
    thinking_time_ms: int
    ai_type: str
    playouts: int = 0
    win_ratio: Optional[float] = None
    candidates: List[CandidateStats] = Field(default_factory=list)


class GameStateRequest(BaseModel):
    """Request model for game-state evaluation"""
    moves: List[Move] = Field(default_factory=list)


class GameStateResponse(BaseModel):
    """Read-only view of a replayed game"""
    current_player: Square
    current_board: Optional[int]
    turn_count: int
    winner: Square
    playable: bool
    boards: List[List[Square]]
    board_winners: List[Square]
    legal_moves: List[Move]


def _replay(moves: List[Move]) -> Game:
    """Rebuild the game from its history, mapping rule errors to HTTP 400."""
    try:
        return Game.from_moves(m.to_tuple() for m in moves)
    except RulesViolationError as e:
        logger.info(f"Rejected move history: {e}")
        raise HTTPException(status_code=400, detail=e.to_dict()) from e


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "service": "Ultimate Tic-Tac-Toe AI Service",
        "status": "running",
        "version": SERVICE_VERSION,
    }


@app.get("/health")
async def health_check():
    """Health check for container orchestration"""
    return {"status": "healthy"}


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@app.post("/ai/move", response_model=MoveResponse)
async def get_ai_move(request: MoveRequest):
    """
    Get AI-selected move for the position reached by ``request.moves``.

    Args:
        request: MoveRequest containing the move history and AI settings.

    Returns:
        MoveResponse with the selected move and, for Monte Carlo, the
        statistics it was chosen from.
    """
    start_time = time.time()
    ai_type = request.ai_type

    try:
        game = _replay(request.moves)
    except HTTPException:
        AI_MOVE_REQUESTS.labels(ai_type=ai_type.value, outcome="invalid").inc()
        raise

    think_time_ms = get_config().clamp_think_time(request.think_time)
    ai = create_ai(ai_type, AIConfig(think_time=think_time_ms, rng_seed=request.seed))

    try:
        selected = ai.choose(game)
    except UltimateTTTError as e:
        AI_MOVE_REQUESTS.labels(ai_type=ai_type.value, outcome="error").inc()
        logger.error(f"AI move selection failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=e.to_dict()) from e

    elapsed = time.time() - start_time
    AI_MOVE_LATENCY.labels(ai_type=ai_type.value).observe(elapsed)
    AI_MOVE_REQUESTS.labels(ai_type=ai_type.value, outcome="success").inc()

    response = MoveResponse(
        move=Move.from_tuple(selected) if selected is not None else None,
        player=game.current_player,
        thinking_time_ms=int(elapsed * 1000),
        ai_type=ai_type.value,
    )

    if isinstance(ai, MonteCarloAI) and ai.last_results is not None:
        stats = ai.last_results
        AI_PLAYOUTS.inc(stats.runs)
        response.playouts = stats.runs
        if selected is not None:
            response.win_ratio = stats.stats(*selected).win_ratio
        response.candidates = [
            CandidateStats(
                board=board,
                cell=cell,
                wins=s.wins,
                losses=s.losses,
                totals=s.totals,
                win_ratio=s.win_ratio,
            )
            for (board, cell), s in stats.candidates()
        ]

    logger.info(
        f"AI move: type={ai_type.value}, turn={game.turn_count}, "
        f"move={selected}, time={response.thinking_time_ms}ms, "
        f"playouts={response.playouts}"
    )
    return response


@app.post("/game/state", response_model=GameStateResponse)
async def get_game_state(request: GameStateRequest):
    """Replay ``request.moves`` and describe the resulting position."""
    game = _replay(request.moves)
    meta = game.meta_board

    return GameStateResponse(
        current_player=game.current_player,
        current_board=game.current_board,
        turn_count=game.turn_count,
        winner=game.winner,
        playable=game.is_playable(),
        boards=[list(meta.board(i).cells) for i in range(len(meta))],
        board_winners=meta.board_winners(),
        legal_moves=[Move.from_tuple(m) for m in game.legal_moves_for_current_player()],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=_config.port)
