"""Scoring weights and ranking cutoff."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

TOP_N_ENV = "NBARANK_TOP_N"
DEFAULT_TOP_N = 15


class ConfigurationError(ValueError):
    """Raised when analysis settings are out of range."""


@dataclass(frozen=True)
class ScoreWeights:
    points: float = 0.4
    true_shooting: float = 0.2
    assists: float = 0.2
    draft_position: float = 0.2


@dataclass(frozen=True)
class AnalysisConfig:
    top_n: int = DEFAULT_TOP_N
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    def __post_init__(self) -> None:
        if isinstance(self.top_n, bool) or not isinstance(self.top_n, int):
            raise ConfigurationError(f"top_n must be an integer, got {self.top_n!r}")
        if self.top_n < 1:
            raise ConfigurationError(f"top_n must be at least 1, got {self.top_n}")


DEFAULT_WEIGHTS = ScoreWeights()


def _env_top_n(default: int) -> int:
    raw = os.getenv(TOP_N_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", TOP_N_ENV, raw, default)
        return default


def load_config(top_n: int | None = None, *, weights: ScoreWeights | None = None) -> AnalysisConfig:
    """Build a config, falling back to ``NBARANK_TOP_N`` when ``top_n`` is omitted."""

    resolved = top_n if top_n is not None else _env_top_n(DEFAULT_TOP_N)
    return AnalysisConfig(top_n=resolved, weights=weights or DEFAULT_WEIGHTS)
