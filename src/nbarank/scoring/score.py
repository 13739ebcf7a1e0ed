"""Composite weighted score computed from aggregated statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Iterable, List

from nbarank.config import DEFAULT_WEIGHTS, ScoreWeights

if TYPE_CHECKING:
    from nbarank.scoring.aggregate import PlayerCareerSummary


@dataclass(frozen=True)
class WeightedScore:
    player_name: str
    score: float


def round_half_up(value: float, places: int = 2) -> float:
    """Round like SQL ``ROUND(numeric)``: halves go away from zero."""

    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept places
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def points_per_draft_position(avg_pts: float, drafted_rows: int, draft_number_sum: int) -> float:
    """Average points divided by the summed draft numbers of drafted rows.

    The denominator is summed across every drafted row of the group, so a
    player drafted 5th with three seasons divides by 15. Zero drafted rows or
    a zero sum both yield 0.
    """

    if drafted_rows == 0 or draft_number_sum == 0:
        return 0.0
    return avg_pts / draft_number_sum


def weighted_score(summary: "PlayerCareerSummary", weights: ScoreWeights = DEFAULT_WEIGHTS) -> float:
    raw = (
        summary.avg_pts * weights.points
        + summary.avg_ts_pct * weights.true_shooting
        + summary.avg_ast_pct * weights.assists
        + summary.avg_pts_per_draft_position * weights.draft_position
    )
    return round_half_up(raw, 2)


def score_players(
    summaries: Iterable["PlayerCareerSummary"],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[WeightedScore]:
    return [
        WeightedScore(player_name=summary.player_name, score=weighted_score(summary, weights))
        for summary in summaries
    ]


__all__ = [
    "WeightedScore",
    "points_per_draft_position",
    "round_half_up",
    "score_players",
    "weighted_score",
]
