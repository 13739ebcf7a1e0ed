from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel


class RankedPlayerResponse(BaseModel):
    rank: int
    player_name: str
    score: float


class PhysicalProfileResponse(BaseModel):
    rank: int
    player_name: str
    weighted_score: float
    college: str | None
    country: str | None
    height: float | None
    cohort_height: float | None
    height_diff: float | None
    weight: float | None
    cohort_weight: float | None
    weight_diff: float | None
    seasons_played: int
    team_count: int
    teams: List[str]
    avg_points: float


class CollegeCountResponse(BaseModel):
    college: str
    players: int


class TeamCountResponse(BaseModel):
    team: str
    players: int


class PeakSeasonResponse(BaseModel):
    rank: int
    player_name: str
    best_age: float
    best_season: str
    best_score: float
    score_before: float | None
    score_after: float | None
    average_best_age: int
    relative_to_average: Literal["above", "below"]


class AnalysisResponse(BaseModel):
    total_records: int
    total_players: int
    top_n: int
    rankings: List[RankedPlayerResponse]
    physical: List[PhysicalProfileResponse]
    colleges: List[CollegeCountResponse]
    teams: List[TeamCountResponse]
    peak_seasons: List[PeakSeasonResponse]
