import logging

import pytest

from nbarank.config import AnalysisConfig, ConfigurationError, ScoreWeights, load_config


def test_default_config_matches_original_weights():
    config = AnalysisConfig()

    assert config.top_n == 15
    assert config.weights == ScoreWeights(points=0.4, true_shooting=0.2, assists=0.2, draft_position=0.2)


@pytest.mark.parametrize("top_n", [0, -3])
def test_non_positive_top_n_rejected(top_n):
    with pytest.raises(ConfigurationError):
        AnalysisConfig(top_n=top_n)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        load_config(0)


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("NBARANK_TOP_N", "5")

    assert load_config().top_n == 5
    assert load_config(8).top_n == 8


def test_load_config_ignores_invalid_environment(monkeypatch, caplog):
    monkeypatch.setenv("NBARANK_TOP_N", "lots")

    with caplog.at_level(logging.WARNING):
        config = load_config()

    assert config.top_n == 15
    assert "NBARANK_TOP_N" in caplog.text
