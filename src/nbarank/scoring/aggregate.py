"""Collapse season rows into per-player and per-season statistical summaries."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean
from typing import Dict, Iterable, List, Sequence, Tuple

from nbarank.models import SeasonRecord
from nbarank.scoring.score import points_per_draft_position


SeasonKey = Tuple[str, float, str]


@dataclass(frozen=True)
class PlayerCareerSummary:
    """Career means for one player."""

    player_name: str
    avg_pts: float
    avg_ts_pct: float
    avg_ast_pct: float
    drafted_rows: int
    draft_number_sum: int
    avg_pts_per_draft_position: float


@dataclass(frozen=True)
class SeasonSummary(PlayerCareerSummary):
    """Means for one ``(player_name, age, season)`` group."""

    age: float
    season: str


def _means(rows: Sequence[SeasonRecord]) -> dict[str, float | int]:
    avg_pts = fmean(row.pts for row in rows)
    drafted = [row.draft_number for row in rows if row.draft_number is not None]
    draft_sum = sum(drafted)
    return {
        "avg_pts": avg_pts,
        "avg_ts_pct": fmean(row.ts_pct for row in rows),
        "avg_ast_pct": fmean(row.ast_pct for row in rows),
        "drafted_rows": len(drafted),
        "draft_number_sum": draft_sum,
        "avg_pts_per_draft_position": points_per_draft_position(avg_pts, len(drafted), draft_sum),
    }


def summarize_careers(records: Iterable[SeasonRecord]) -> Dict[str, PlayerCareerSummary]:
    """Group rows by ``player_name`` and average their statistics."""

    groups: defaultdict[str, List[SeasonRecord]] = defaultdict(list)
    for record in records:
        groups[record.player_name].append(record)
    return {
        name: PlayerCareerSummary(player_name=name, **_means(groups[name]))
        for name in sorted(groups)
    }


def summarize_seasons(records: Iterable[SeasonRecord]) -> Dict[SeasonKey, SeasonSummary]:
    """Group rows by ``(player_name, age, season)`` and average their statistics."""

    groups: defaultdict[SeasonKey, List[SeasonRecord]] = defaultdict(list)
    for record in records:
        groups[(record.player_name, record.age, record.season)].append(record)
    return {
        key: SeasonSummary(player_name=key[0], age=key[1], season=key[2], **_means(groups[key]))
        for key in sorted(groups)
    }


__all__ = [
    "PlayerCareerSummary",
    "SeasonKey",
    "SeasonSummary",
    "summarize_careers",
    "summarize_seasons",
]
