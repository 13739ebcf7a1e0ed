"""Read-only reports over the ranked player set (cross-tabs, peak seasons, export)."""

from .crosstab import CollegeCount, TeamCount, college_counts, team_counts
from .export import REPORT_NAMES, ReportExportError, report_to_csv, resolve_report
from .peak_age import PeakSeason, SeasonScore, peak_seasons, score_seasons
from .physical import PhysicalProfile, physical_profiles

__all__ = [
    "CollegeCount",
    "PeakSeason",
    "PhysicalProfile",
    "REPORT_NAMES",
    "ReportExportError",
    "SeasonScore",
    "TeamCount",
    "college_counts",
    "peak_seasons",
    "physical_profiles",
    "report_to_csv",
    "resolve_report",
    "score_seasons",
    "team_counts",
]
