import io
import logging

import pytest

from shared.config import config as config_module
from shared.config.config import Config, get_config, get_timezone
from shared.config.settings import Settings
from shared.exceptions import ConfigurationError, MarketSentimentError
from shared.logging import get_contextual_logger, setup_logging


@pytest.fixture
def fresh_config(monkeypatch):
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.setattr(Config, "_settings", None)
    monkeypatch.setattr(config_module, "_config", None)
    yield
    Config._instance = None
    Config._settings = None
    config_module._config = None


def test_defaults_are_valid():
    settings = Settings.defaults()
    settings.validate()
    assert settings.ranking.top_picks_limit == 5
    assert settings.news.max_news_items == 20
    assert settings.scoring.random_seed is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("SCORING_RANDOM_SEED", "42")
    monkeypatch.setenv("RANKING_MAX_WORKERS", "3")
    monkeypatch.setenv("RANKING_SHOW_PROGRESS", "true")
    monkeypatch.setenv("NEWS_MAX_ITEMS", "5")
    monkeypatch.setenv("TIMEZONE", "Europe/London")

    settings = Settings.from_env()

    assert settings.scoring.random_seed == 42
    assert settings.ranking.max_workers == 3
    assert settings.ranking.show_progress is True
    assert settings.news.max_news_items == 5
    assert settings.tz.zone == "Europe/London"


def test_blank_seed_means_unseeded(monkeypatch):
    monkeypatch.setenv("SCORING_RANDOM_SEED", "")
    assert Settings.from_env().scoring.random_seed is None


def test_non_numeric_env_is_configuration_error(monkeypatch):
    monkeypatch.setenv("RANKING_MAX_WORKERS", "many")
    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_validate_collects_errors():
    settings = Settings.defaults()
    settings.ranking.max_workers = 0
    settings.timezone = "Mars/Olympus"

    with pytest.raises(ConfigurationError) as excinfo:
        settings.validate()

    message = str(excinfo.value)
    assert "max_workers" in message
    assert "Mars/Olympus" in message
    assert isinstance(excinfo.value, MarketSentimentError)


def test_config_is_singleton(fresh_config, monkeypatch):
    monkeypatch.setenv("RANKING_TOP_PICKS_LIMIT", "7")
    assert Config() is Config()
    assert get_config().settings.ranking.top_picks_limit == 7


def test_update_settings_nested(fresh_config):
    config = get_config()
    config.update_settings(**{"ranking.max_workers": 2, "debug": True})
    assert config.settings.ranking.max_workers == 2
    assert config.settings.debug is True

    with pytest.raises(ConfigurationError):
        config.update_settings(**{"news.max_news_items": 0, "ranking.max_workers": 8})
    # rejected updates leave the previous settings in place
    assert config.settings.news.max_news_items == 20
    assert config.settings.ranking.max_workers == 2


@pytest.mark.parametrize("key", ["ranking.nope", "nope", "ranking.deep.nope"])
def test_update_settings_unknown_key(fresh_config, key):
    with pytest.raises(ConfigurationError) as excinfo:
        get_config().update_settings(**{key: 1})
    assert excinfo.value.details == {"key": key}


def test_reload_reads_environment(fresh_config, monkeypatch):
    config = get_config()
    monkeypatch.setenv("NEWS_MAX_ITEMS", "3")
    config.reload()
    assert config.settings.news.max_news_items == 3


def test_exception_details_in_message():
    error = ConfigurationError("Bad value", {"key": "RANKING_MAX_WORKERS"})
    assert str(error) == "Bad value (key=RANKING_MAX_WORKERS)"


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logging.getLogger("tests").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        assert logging.getLogger("transformers").level == logging.WARNING
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_get_timezone(fresh_config, monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Asia/Tokyo")
    assert get_timezone().zone == "Asia/Tokyo"


def test_setup_logging_level_name_and_stream():
    stream = io.StringIO()
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(level="warning", stream=stream)
        logging.getLogger("tests").info("quiet")
        logging.getLogger("tests").warning("loud")
        assert root.level == logging.WARNING
        assert "loud" in stream.getvalue()
        assert "quiet" not in stream.getvalue()
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(level="chatty")


def test_contextual_logger_prefixes_context(caplog):
    log = get_contextual_logger("tests.context", sector="Energy", run=2)
    with caplog.at_level(logging.WARNING, logger="tests.context"):
        log.warning("No data for stock XOM")
        log.error("Error fetching stock CVX")
    assert [r.getMessage() for r in caplog.records] == [
        "[sector=Energy | run=2] No data for stock XOM",
        "[sector=Energy | run=2] Error fetching stock CVX",
    ]
