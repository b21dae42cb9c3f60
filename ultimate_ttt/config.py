"""Environment-driven configuration for the ultimate tic-tac-toe service.

All settings are read once from the process environment and cached:

    UTTT_DEFAULT_THINK_TIME_MS  Monte Carlo budget when a caller gives none
    UTTT_MAX_THINK_TIME_MS      upper clamp for service requests
    UTTT_LOG_LEVEL              logging level name
    UTTT_JSON_LOGS              emit JSON log lines (1/true/yes/on)
    CORS_ORIGINS                comma-separated allowed origins
    AI_SERVICE_PORT             uvicorn port when run as __main__
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, Tuple

from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_THINK_TIME_MS = 1000
MAX_THINK_TIME_MS = 10000
DEFAULT_PORT = 8001


def _env_flag(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer",
            context={"value": raw},
        ) from e
    if value < 0:
        raise ConfigurationError(
            f"{name} must be non-negative",
            context={"value": value},
        )
    return value


@dataclass(frozen=True)
class ServiceConfig:
    """Resolved service settings."""
    default_think_time_ms: int = DEFAULT_THINK_TIME_MS
    max_think_time_ms: int = MAX_THINK_TIME_MS
    log_level: str = "INFO"
    json_logs: bool = False
    cors_origins: Tuple[str, ...] = ("*",)
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if env is None else env

        default_think = _env_int(env, "UTTT_DEFAULT_THINK_TIME_MS", DEFAULT_THINK_TIME_MS)
        max_think = _env_int(env, "UTTT_MAX_THINK_TIME_MS", MAX_THINK_TIME_MS)
        if default_think > max_think:
            raise ConfigurationError(
                "UTTT_DEFAULT_THINK_TIME_MS exceeds UTTT_MAX_THINK_TIME_MS",
                context={"default": default_think, "max": max_think},
            )

        origins = tuple(
            o.strip() for o in env.get("CORS_ORIGINS", "*").split(",") if o.strip()
        )

        return cls(
            default_think_time_ms=default_think,
            max_think_time_ms=max_think,
            log_level=env.get("UTTT_LOG_LEVEL", "INFO").upper(),
            json_logs=_env_flag(env, "UTTT_JSON_LOGS"),
            cors_origins=origins or ("*",),
            port=_env_int(env, "AI_SERVICE_PORT", DEFAULT_PORT),
        )

    def clamp_think_time(self, think_time_ms: Optional[int]) -> int:
        """Apply the default and the upper bound to a requested budget."""
        if think_time_ms is None:
            return self.default_think_time_ms
        return min(think_time_ms, self.max_think_time_ms)


@lru_cache(maxsize=1)
def get_config() -> ServiceConfig:
    """Process-wide configuration, parsed on first use."""
    return ServiceConfig.from_env()
