"""Pydantic models for API I/O."""

from .analysis import (
    AnalysisResponse,
    CollegeCountResponse,
    PeakSeasonResponse,
    PhysicalProfileResponse,
    RankedPlayerResponse,
    TeamCountResponse,
)

__all__ = [
    "AnalysisResponse",
    "CollegeCountResponse",
    "PeakSeasonResponse",
    "PhysicalProfileResponse",
    "RankedPlayerResponse",
    "TeamCountResponse",
]
