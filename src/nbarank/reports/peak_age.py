"""Best-season analysis for ranked players.

Each player's ``(age, season)`` groups are scored with the same weighted
formula used for careers. Within a player, seasons are ordered
chronologically to find the neighbouring scores, and independently ordered
by score to find the best one. The neighbours reported for the best season
are its chronological predecessor and successor.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, List, Literal, Mapping, Optional, Sequence

from nbarank.config import DEFAULT_WEIGHTS, ScoreWeights
from nbarank.models import SeasonRecord
from nbarank.scoring import RankedPlayer, SeasonSummary, round_half_up, summarize_seasons, weighted_score


@dataclass(frozen=True)
class SeasonScore:
    player_name: str
    age: float
    season: str
    score: float
    previous_score: Optional[float]
    next_score: Optional[float]
    season_rank: int


@dataclass(frozen=True)
class PeakSeason:
    rank: int
    player_name: str
    best_age: float
    best_season: str
    best_score: float
    score_before: Optional[float]
    score_after: Optional[float]
    average_best_age: int
    relative_to_average: Literal["above", "below"]


def _score_player_seasons(
    summaries: Sequence[SeasonSummary],
    weights: ScoreWeights,
) -> List[SeasonScore]:
    chronological = sorted(summaries, key=lambda item: (item.season, item.age))
    scores = [weighted_score(item, weights) for item in chronological]
    previous: List[Optional[float]] = [None, *scores[:-1]]
    following: List[Optional[float]] = [*scores[1:], None]

    # ties go to the earlier season
    by_score = sorted(range(len(chronological)), key=lambda idx: (-scores[idx], idx))
    season_rank = {idx: position for position, idx in enumerate(by_score, start=1)}

    return [
        SeasonScore(
            player_name=item.player_name,
            age=item.age,
            season=item.season,
            score=score,
            previous_score=prev,
            next_score=nxt,
            season_rank=season_rank[idx],
        )
        for idx, (item, score, prev, nxt) in enumerate(zip(chronological, scores, previous, following))
    ]


def score_seasons(
    summaries: Iterable[SeasonSummary],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[SeasonScore]:
    """Score every season summary and attach chronological neighbours and per-player rank."""

    by_player: defaultdict[str, List[SeasonSummary]] = defaultdict(list)
    for summary in summaries:
        by_player[summary.player_name].append(summary)

    results: List[SeasonScore] = []
    for name in sorted(by_player):
        results.extend(_score_player_seasons(by_player[name], weights))
    return results


def _best_seasons(season_scores: Iterable[SeasonScore]) -> Mapping[str, SeasonScore]:
    return {item.player_name: item for item in season_scores if item.season_rank == 1}


def peak_seasons(
    ranked: Sequence[RankedPlayer],
    records: Iterable[SeasonRecord],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[PeakSeason]:
    """Return the best season of every ranked player, best score first."""

    if not ranked:
        return []
    names = {player.player_name for player in ranked}
    relevant = [record for record in records if record.player_name in names]
    best = _best_seasons(score_seasons(summarize_seasons(relevant).values(), weights))

    pairs = [(player, best[player.player_name]) for player in ranked if player.player_name in best]
    if not pairs:
        return []

    mean_age = fmean(season.age for _, season in pairs)
    average_best_age = int(round_half_up(mean_age, 0))

    rows = [
        PeakSeason(
            rank=player.rank,
            player_name=player.player_name,
            best_age=season.age,
            best_season=season.season,
            best_score=season.score,
            score_before=season.previous_score,
            score_after=season.next_score,
            average_best_age=average_best_age,
            relative_to_average="above" if season.age > mean_age else "below",
        )
        for player, season in pairs
    ]
    rows.sort(key=lambda row: (-row.best_score, row.rank))
    return rows


__all__ = ["PeakSeason", "SeasonScore", "peak_seasons", "score_seasons"]
