import pytest
from pydantic import ValidationError

from nbarank.models import SeasonRecord


def _record(**overrides) -> SeasonRecord:
    data = {
        "player_name": "Test Player",
        "age": 24.0,
        "season": "2019-20",
        "pts": 20.0,
        "ts_pct": 0.55,
        "ast_pct": 0.2,
    }
    data.update(overrides)
    return SeasonRecord(**data)


def test_season_record_is_frozen():
    record = _record(draft_number=5)

    assert record.player_name == "Test Player"
    assert record.is_drafted

    with pytest.raises((TypeError, ValidationError)):
        record.pts = 30.0  # type: ignore[misc]


def test_unknown_descriptive_values_normalize_to_none():
    record = _record(college="None", country="  USA ", team_abbreviation="")

    assert record.college is None
    assert record.country == "USA"
    assert record.team_abbreviation is None


def test_undrafted_record_has_no_draft_number():
    record = _record()

    assert record.draft_number is None
    assert not record.is_drafted


def test_negative_draft_number_rejected():
    with pytest.raises(ValidationError):
        _record(draft_number=-1)


def test_empty_player_name_rejected():
    with pytest.raises(ValidationError):
        _record(player_name="")


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_stats_rejected(value):
    with pytest.raises(ValidationError):
        _record(pts=value)
