"""End-to-end analysis pass: aggregate, score, rank, then report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from nbarank.config import AnalysisConfig, load_config
from nbarank.models import SeasonRecord
from nbarank.reports import (
    CollegeCount,
    PeakSeason,
    PhysicalProfile,
    TeamCount,
    college_counts,
    peak_seasons,
    physical_profiles,
    team_counts,
)
from nbarank.scoring import RankedPlayer, rank_players, score_players, summarize_careers


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    total_records: int
    total_players: int
    top_n: int
    rankings: List[RankedPlayer]
    physical: List[PhysicalProfile]
    colleges: List[CollegeCount]
    teams: List[TeamCount]
    peak_seasons: List[PeakSeason]


def run_analysis(
    records: Iterable[SeasonRecord],
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Rank players by career weighted score and build every report for the top N."""

    config = config or load_config()
    rows = list(records)

    summaries = summarize_careers(rows)
    scores = score_players(summaries.values(), config.weights)
    ranked = rank_players(scores, config.top_n)

    result = AnalysisResult(
        total_records=len(rows),
        total_players=len(summaries),
        top_n=config.top_n,
        rankings=ranked,
        physical=physical_profiles(ranked, rows),
        colleges=college_counts(ranked, rows),
        teams=team_counts(ranked, rows),
        peak_seasons=peak_seasons(ranked, rows, config.weights),
    )
    logger.info(
        "Ranked %d of %d players from %d season records (top_n=%d)",
        len(ranked),
        result.total_players,
        result.total_records,
        config.top_n,
    )
    return result


__all__ = ["AnalysisResult", "run_analysis"]
