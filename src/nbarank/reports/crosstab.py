"""Count ranked players per college and per team."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from nbarank.models import SeasonRecord
from nbarank.scoring import RankedPlayer


@dataclass(frozen=True)
class CollegeCount:
    college: str
    players: int


@dataclass(frozen=True)
class TeamCount:
    team: str
    players: int


def _count_distinct_players(
    ranked: Sequence[RankedPlayer],
    records: Iterable[SeasonRecord],
    key: Callable[[SeasonRecord], Optional[str]],
) -> List[Tuple[str, int]]:
    names = {player.player_name for player in ranked}
    if not names:
        return []
    players_by_value: defaultdict[str, set[str]] = defaultdict(set)
    for record in records:
        if record.player_name not in names:
            continue
        value = key(record)
        if value:
            players_by_value[value].add(record.player_name)
    counts = [(value, len(players)) for value, players in players_by_value.items()]
    counts.sort(key=lambda item: (-item[1], item[0]))
    return counts


def college_counts(ranked: Sequence[RankedPlayer], records: Iterable[SeasonRecord]) -> List[CollegeCount]:
    """Ranked players per known college, most represented first."""

    return [
        CollegeCount(college=college, players=count)
        for college, count in _count_distinct_players(ranked, records, lambda record: record.college)
    ]


def team_counts(ranked: Sequence[RankedPlayer], records: Iterable[SeasonRecord]) -> List[TeamCount]:
    """Ranked players per team; a player counts once for every team they played for."""

    return [
        TeamCount(team=team, players=count)
        for team, count in _count_distinct_players(ranked, records, lambda record: record.team_abbreviation)
    ]


__all__ = ["CollegeCount", "TeamCount", "college_counts", "team_counts"]
