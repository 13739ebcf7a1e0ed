"""Order weighted scores and keep the top of the table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from nbarank.config import DEFAULT_TOP_N, ConfigurationError
from nbarank.scoring.score import WeightedScore


@dataclass(frozen=True)
class RankedPlayer:
    rank: int
    player_name: str
    score: float


def rank_players(scores: Iterable[WeightedScore], top_n: int = DEFAULT_TOP_N) -> List[RankedPlayer]:
    """Rank by score descending; equal scores fall back to player name ascending."""

    if top_n < 1:
        raise ConfigurationError(f"top_n must be at least 1, got {top_n}")
    ordered = sorted(scores, key=lambda item: (-item.score, item.player_name))
    return [
        RankedPlayer(rank=index, player_name=item.player_name, score=item.score)
        for index, item in enumerate(ordered[:top_n], start=1)
    ]


__all__ = ["RankedPlayer", "rank_players"]
