"""Helpers to load season-statistics CSVs and emit canonical records."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from nbarank.models import SeasonRecord


logger = logging.getLogger(__name__)

UNDRAFTED_TOKENS = {"undrafted", "none", ""}

# Column names of the public ``all_seasons.csv`` dataset.
DEFAULT_SEASON_MAPPING = {
    "player_name": "player_name",
    "age": "age",
    "season": "season",
    "pts": "pts",
    "ts_pct": "ts_pct",
    "ast_pct": "ast_pct",
    "draft_number": "draft_number",
    "player_height": "player_height",
    "player_weight": "player_weight",
    "college": "college",
    "country": "country",
    "team_abbreviation": "team_abbreviation",
}


class SeasonRow(BaseModel):
    line_number: int = 0
    raw_name: str
    raw_age: str
    raw_season: str
    raw_pts: str
    raw_ts_pct: str
    raw_ast_pct: str
    raw_draft_number: Optional[str] = None
    raw_height: Optional[str] = None
    raw_weight: Optional[str] = None
    raw_college: Optional[str] = None
    raw_country: Optional[str] = None
    raw_team: Optional[str] = None

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, str],
        mapping: Mapping[str, str],
        *,
        line_number: int = 0,
    ) -> "SeasonRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            column = mapping.get(key, DEFAULT_SEASON_MAPPING[key])
            value = row.get(column)
            return value.strip() if value is not None else default

        return cls(
            line_number=line_number,
            raw_name=extract("player_name", default=""),
            raw_age=extract("age", default=""),
            raw_season=extract("season", default=""),
            raw_pts=extract("pts", default=""),
            raw_ts_pct=extract("ts_pct", default=""),
            raw_ast_pct=extract("ast_pct", default=""),
            raw_draft_number=extract("draft_number"),
            raw_height=extract("player_height"),
            raw_weight=extract("player_weight"),
            raw_college=extract("college"),
            raw_country=extract("country"),
            raw_team=extract("team_abbreviation"),
        )


def load_season_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[SeasonRow]:
    mapping = mapping or DEFAULT_SEASON_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        # line 1 is the header
        rows = [
            SeasonRow.from_mapping(row, mapping, line_number=index)
            for index, row in enumerate(reader, start=2)
        ]
    logger.debug("Loaded %d season rows from %s", len(rows), path)
    return rows


def _parse_float(raw: str, *, field: str, line_number: int) -> float:
    text = raw.strip()
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"line {line_number}: {field} '{raw}' is not numeric") from None
    if not math.isfinite(value):
        raise ValueError(f"line {line_number}: {field} '{raw}' is not numeric")
    return value


def _parse_optional_float(raw: Optional[str], *, field: str, line_number: int) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return _parse_float(raw, field=field, line_number=line_number)


def parse_draft_number(raw: Optional[str], *, line_number: int = 0) -> Optional[int]:
    """Return the draft position, or ``None`` for undrafted players."""

    if raw is None:
        return None
    text = raw.strip()
    if text.lower() in UNDRAFTED_TOKENS:
        return None
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"line {line_number}: draft_number '{raw}' is not numeric") from None
    if value < 0 or not value.is_integer():
        raise ValueError(f"line {line_number}: draft_number '{raw}' is not a draft position")
    return int(value)


def rows_to_records(rows: Sequence[SeasonRow]) -> List[SeasonRecord]:
    records: List[SeasonRecord] = []
    for row in rows:
        line = row.line_number
        if not row.raw_name:
            raise ValueError(f"line {line}: player_name is empty")
        if not row.raw_season:
            raise ValueError(f"line {line}: season is empty")
        try:
            record = SeasonRecord(
                player_name=row.raw_name,
                age=_parse_float(row.raw_age, field="age", line_number=line),
                season=row.raw_season,
                pts=_parse_float(row.raw_pts, field="pts", line_number=line),
                ts_pct=_parse_float(row.raw_ts_pct, field="ts_pct", line_number=line),
                ast_pct=_parse_float(row.raw_ast_pct, field="ast_pct", line_number=line),
                draft_number=parse_draft_number(row.raw_draft_number, line_number=line),
                player_height=_parse_optional_float(row.raw_height, field="player_height", line_number=line),
                player_weight=_parse_optional_float(row.raw_weight, field="player_weight", line_number=line),
                college=row.raw_college,
                country=row.raw_country,
                team_abbreviation=row.raw_team.upper() if row.raw_team else None,
            )
        except ValidationError as exc:
            raise ValueError(f"line {line}: {exc.errors()[0]['msg']}") from exc
        records.append(record)
    return records


def load_records_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> List[SeasonRecord]:
    records = rows_to_records(load_season_csv(path, mapping=mapping))
    logger.info(
        "Loaded %d season records for %d players from %s",
        len(records),
        len({record.player_name for record in records}),
        path,
    )
    return records
