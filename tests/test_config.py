"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from ybs_resolver.config import (
    AppConfig,
    NLPConfig,
    ObservabilityConfig,
    SearchConfig,
    get_config,
    reset_config,
)
from ybs_resolver.domain.errors import ConfigurationError
from ybs_resolver.monitoring import configure_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.search.max_transfers == 2
    assert config.search.max_results == 5
    assert config.search.nearby_radius_km == 1.0
    assert config.nlp.origin_markers == ("ကနေ", "မှ")
    assert config.nlp.destination_markers == ("ကို", "သို့", "သွားချင်တာ")
    assert config.data.stops_path.name == "stops.json"
    assert config.data.routes_path.parent == config.project_root / "data"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("YBS_SEARCH_MAX_TRANSFERS", "1")
    monkeypatch.setenv("YBS_NLP_DESTINATION_MARKERS", '["to"]')
    reset_config()

    config = get_config()

    assert config.search.max_transfers == 1
    assert config.nlp.destination_markers == ("to",)


def test_empty_markers_are_dropped():
    assert NLPConfig(origin_markers=("", "from")).origin_markers == ("from",)


@pytest.mark.parametrize(
    "kwargs",
    [{"max_transfers": -1}, {"max_results": 0}, {"nearby_radius_km": 0}],
)
def test_invalid_search_settings(kwargs):
    with pytest.raises(ValidationError):
        SearchConfig(**kwargs)


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(ObservabilityConfig(level="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert excinfo.value.setting_name == "YBS_LOG_LEVEL"
