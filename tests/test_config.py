"""Tests for environment-driven configuration."""

import pytest

from inventory_search.config import Config, Environment, config
from inventory_search.models import SearchOptions

ENV_VARS = (
    "ENVIRONMENT",
    "FUZZY_THRESHOLD",
    "MIN_SCORE",
    "MAX_RESULTS",
    "INCLUDE_INACTIVE",
    "SORT_BY",
    "SORT_ORDER",
    "ENABLE_TELEMETRY",
    "LOG_LEVEL",
)


@pytest.fixture
def env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    config.reload()


def test_config_is_singleton():
    assert Config() is config


def test_defaults(env):
    config.reload()
    assert config.search_options() == SearchOptions()
    assert config.environment == Environment.DEVELOPMENT.value
    assert config.log_level == "INFO"


def test_search_options_from_env(env):
    env.setenv("FUZZY_THRESHOLD", "0.55")
    env.setenv("MIN_SCORE", "0.1")
    env.setenv("MAX_RESULTS", "7")
    env.setenv("INCLUDE_INACTIVE", "false")
    env.setenv("SORT_BY", "Price")
    env.setenv("SORT_ORDER", "asc")
    config.reload()

    options = config.search_options()
    assert options.fuzzy_threshold == 0.55
    assert options.min_score == 0.1
    assert options.max_results == 7
    assert options.include_inactive is False
    assert options.sort_by == "price"
    assert options.sort_order == "asc"


def test_invalid_values_fall_back(env):
    env.setenv("FUZZY_THRESHOLD", "high")
    env.setenv("MIN_SCORE", "2")
    env.setenv("MAX_RESULTS", "0")
    env.setenv("SORT_BY", "colour")
    env.setenv("ENVIRONMENT", "moon")
    env.setenv("LOG_LEVEL", "loud")
    config.reload()

    assert config.fuzzy_threshold == 0.7
    assert config.min_score == 0.3
    assert config.max_results == 100
    assert config.sort_by == "relevance"
    assert config.environment == "development"
    assert config.log_level == "INFO"


def test_to_dict(env):
    config.reload()
    data = config.to_dict()
    assert data["max_results"] == 100
    assert data["enable_telemetry"] is True
