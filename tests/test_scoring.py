import math

import pytest

from nbarank.config import ConfigurationError, ScoreWeights
from nbarank.models import SeasonRecord
from nbarank.scoring import (
    PlayerCareerSummary,
    WeightedScore,
    points_per_draft_position,
    rank_players,
    round_half_up,
    score_players,
    summarize_careers,
    summarize_seasons,
    weighted_score,
)


def _record(name: str, pts: float, *, draft=None, season="2019-20", age=25.0, ts=0.5, ast=0.2) -> SeasonRecord:
    return SeasonRecord(
        player_name=name,
        age=age,
        season=season,
        pts=pts,
        ts_pct=ts,
        ast_pct=ast,
        draft_number=draft,
    )


def test_draft_ratio_ignores_undrafted_rows():
    records = [
        _record("Mixed", 20.0, draft=5, season="2019-20"),
        _record("Mixed", 30.0, draft=None, season="2020-21"),
    ]

    summary = summarize_careers(records)["Mixed"]

    assert summary.avg_pts == pytest.approx(25.0)
    assert summary.drafted_rows == 1
    assert summary.draft_number_sum == 5
    assert summary.avg_pts_per_draft_position == pytest.approx(5.0)


def test_draft_ratio_sums_draft_number_across_rows():
    records = [
        _record("Repeat", 10.0, draft=5, season="2019-20"),
        _record("Repeat", 20.0, draft=5, season="2020-21"),
    ]

    summary = summarize_careers(records)["Repeat"]

    assert summary.draft_number_sum == 10
    assert summary.avg_pts_per_draft_position == pytest.approx(1.5)


def test_all_undrafted_player_has_zero_ratio():
    records = [_record("Walk On", 12.0), _record("Walk On", 14.0, season="2020-21")]

    summary = summarize_careers(records)["Walk On"]

    assert summary.drafted_rows == 0
    assert summary.avg_pts_per_draft_position == 0


def test_zero_draft_sum_resolves_to_zero():
    summary = summarize_careers([_record("Zero", 18.0, draft=0)])["Zero"]

    assert summary.drafted_rows == 1
    assert summary.avg_pts_per_draft_position == 0


@pytest.mark.parametrize(
    ("avg_pts", "rows", "total", "expected"),
    [(25.0, 1, 5, 5.0), (25.0, 0, 0, 0.0), (25.0, 2, 0, 0.0)],
)
def test_points_per_draft_position(avg_pts, rows, total, expected):
    assert points_per_draft_position(avg_pts, rows, total) == pytest.approx(expected)


def test_round_half_up_matches_sql_rounding():
    assert round_half_up(2.675) == 2.68
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-1.005) == -1.01
    assert round_half_up(26.5, 0) == 27.0


def test_weighted_score_formula():
    summary = PlayerCareerSummary(
        player_name="Formula",
        avg_pts=25.0,
        avg_ts_pct=0.5,
        avg_ast_pct=0.2,
        drafted_rows=1,
        draft_number_sum=5,
        avg_pts_per_draft_position=5.0,
    )

    # 10.0 + 0.1 + 0.04 + 1.0
    assert weighted_score(summary) == 11.14


def test_score_players_uses_custom_weights():
    summaries = summarize_careers([_record("Scorer", 20.0, ts=0.6, ast=0.3)]).values()

    scores = score_players(summaries, ScoreWeights(points=1.0, true_shooting=0.0, assists=0.0, draft_position=0.0))

    assert scores == [WeightedScore(player_name="Scorer", score=20.0)]


def test_summarize_seasons_groups_by_player_age_and_season():
    records = [
        _record("Split", 10.0, season="2019-20", age=24.0),
        _record("Split", 20.0, season="2019-20", age=24.0),
        _record("Split", 30.0, season="2020-21", age=25.0),
    ]

    summaries = summarize_seasons(records)

    assert list(summaries) == [("Split", 24.0, "2019-20"), ("Split", 25.0, "2020-21")]
    first = summaries[("Split", 24.0, "2019-20")]
    assert first.avg_pts == pytest.approx(15.0)
    assert first.season == "2019-20"
    assert first.age == 24.0


def test_rank_players_breaks_ties_by_name():
    scores = [
        WeightedScore(player_name="Bravo", score=10.0),
        WeightedScore(player_name="Alpha", score=10.0),
        WeightedScore(player_name="Charlie", score=8.0),
    ]

    ranked = rank_players(scores, top_n=2)

    assert [(player.rank, player.player_name) for player in ranked] == [(1, "Alpha"), (2, "Bravo")]


def test_rank_players_sorted_descending_and_capped():
    scores = [WeightedScore(player_name=f"P{idx:02d}", score=float(idx)) for idx in range(20)]

    ranked = rank_players(scores)

    assert len(ranked) == 15
    assert [player.score for player in ranked] == sorted((p.score for p in ranked), reverse=True)
    assert ranked[0].player_name == "P19"


def test_rank_players_top_n_larger_than_population():
    ranked = rank_players([WeightedScore(player_name="Solo", score=3.0)], top_n=15)

    assert len(ranked) == 1
    assert ranked[0].rank == 1


def test_rank_players_empty_and_invalid_top_n():
    assert rank_players([], top_n=5) == []
    with pytest.raises(ConfigurationError):
        rank_players([], top_n=0)


def test_round_half_up_handles_large_and_non_finite_values():
    assert round_half_up(1e30) == 1e30
    assert round_half_up(123456789012345678901234567890.5) == pytest.approx(1.2345678901234568e29)
    assert round_half_up(float("inf")) == float("inf")
    assert math.isnan(round_half_up(float("nan")))
