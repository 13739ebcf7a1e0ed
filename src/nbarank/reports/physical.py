"""Physical attributes and career footprint of ranked players."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, List, Optional, Sequence, Tuple

from nbarank.models import SeasonRecord
from nbarank.scoring import RankedPlayer, round_half_up


@dataclass(frozen=True)
class PhysicalProfile:
    rank: int
    player_name: str
    weighted_score: float
    college: Optional[str]
    country: Optional[str]
    height: Optional[float]
    cohort_height: Optional[float]
    height_diff: Optional[float]
    weight: Optional[float]
    cohort_weight: Optional[float]
    weight_diff: Optional[float]
    seasons_played: int
    team_count: int
    teams: Tuple[str, ...]
    avg_points: float


def _mean_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    present = [value for value in values if value is not None]
    return fmean(present) if present else None


def _max_known(values: Iterable[Optional[str]]) -> Optional[str]:
    known = [value for value in values if value]
    return max(known) if known else None


def _rounded(value: Optional[float]) -> Optional[float]:
    return None if value is None else round_half_up(value, 2)


def _diff(value: Optional[float], cohort: Optional[float]) -> Optional[float]:
    if value is None or cohort is None:
        return None
    return round_half_up(value - cohort, 2)


def physical_profiles(
    ranked: Sequence[RankedPlayer],
    records: Iterable[SeasonRecord],
) -> List[PhysicalProfile]:
    """Per-player height/weight means compared with the ranked cohort's mean."""

    if not ranked:
        return []
    names = {player.player_name for player in ranked}
    by_player: defaultdict[str, List[SeasonRecord]] = defaultdict(list)
    for record in records:
        if record.player_name in names:
            by_player[record.player_name].append(record)

    present = [player for player in ranked if by_player.get(player.player_name)]
    heights = {
        player.player_name: _mean_or_none(row.player_height for row in by_player[player.player_name])
        for player in present
    }
    weights = {
        player.player_name: _mean_or_none(row.player_weight for row in by_player[player.player_name])
        for player in present
    }
    cohort_height = _mean_or_none(heights.values())
    cohort_weight = _mean_or_none(weights.values())

    profiles: List[PhysicalProfile] = []
    for player in present:
        rows = by_player[player.player_name]
        teams = tuple(sorted({row.team_abbreviation for row in rows if row.team_abbreviation}))
        height = heights[player.player_name]
        weight = weights[player.player_name]
        profiles.append(
            PhysicalProfile(
                rank=player.rank,
                player_name=player.player_name,
                weighted_score=player.score,
                college=_max_known(row.college for row in rows),
                country=_max_known(row.country for row in rows),
                height=_rounded(height),
                cohort_height=_rounded(cohort_height),
                height_diff=_diff(height, cohort_height),
                weight=_rounded(weight),
                cohort_weight=_rounded(cohort_weight),
                weight_diff=_diff(weight, cohort_weight),
                seasons_played=len({row.season for row in rows}),
                team_count=len(teams),
                teams=teams,
                avg_points=round_half_up(fmean(row.pts for row in rows), 2),
            )
        )
    profiles.sort(key=lambda profile: (-profile.weighted_score, profile.rank))
    return profiles


__all__ = ["PhysicalProfile", "physical_profiles"]
