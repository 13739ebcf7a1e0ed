"""Aggregation, weighted scoring and ranking of player statistics."""

from .aggregate import (
    PlayerCareerSummary,
    SeasonSummary,
    summarize_careers,
    summarize_seasons,
)
from .rank import RankedPlayer, rank_players
from .score import (
    WeightedScore,
    points_per_draft_position,
    round_half_up,
    score_players,
    weighted_score,
)

__all__ = [
    "PlayerCareerSummary",
    "RankedPlayer",
    "SeasonSummary",
    "WeightedScore",
    "points_per_draft_position",
    "rank_players",
    "round_half_up",
    "score_players",
    "summarize_careers",
    "summarize_seasons",
    "weighted_score",
]
