"""Per-player, per-season statistics row."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


_UNKNOWN_TOKENS = {"", "none", "null", "n/a"}


class SeasonRecord(BaseModel):
    """One row of the season table; a player has one per season/team stint."""

    player_name: str = Field(..., min_length=1)
    age: float
    season: str
    pts: float
    ts_pct: float
    ast_pct: float
    draft_number: Optional[int] = Field(default=None, ge=0)
    player_height: Optional[float] = None
    player_weight: Optional[float] = None
    college: Optional[str] = None
    country: Optional[str] = None
    team_abbreviation: Optional[str] = None

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("college", "country", "team_abbreviation")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        text = value.strip()
        if text.lower() in _UNKNOWN_TOKENS:
            return None
        return text

    @property
    def is_drafted(self) -> bool:
        return self.draft_number is not None
