"""Input adapters that normalize raw season-statistics data."""

from .seasons import (
    DEFAULT_SEASON_MAPPING,
    SeasonRow,
    load_records_from_csv,
    load_season_csv,
    parse_draft_number,
    rows_to_records,
)

__all__ = [
    "DEFAULT_SEASON_MAPPING",
    "SeasonRow",
    "load_season_csv",
    "load_records_from_csv",
    "parse_draft_number",
    "rows_to_records",
]
