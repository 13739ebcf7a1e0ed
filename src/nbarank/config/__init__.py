"""Configuration helpers for scoring weights and the ranking cutoff."""

from .analysis import (
    DEFAULT_TOP_N,
    DEFAULT_WEIGHTS,
    AnalysisConfig,
    ConfigurationError,
    ScoreWeights,
    load_config,
)

__all__ = [
    "DEFAULT_TOP_N",
    "DEFAULT_WEIGHTS",
    "AnalysisConfig",
    "ConfigurationError",
    "ScoreWeights",
    "load_config",
]
