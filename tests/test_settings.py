"""Tests for environment-driven settings and logging setup."""

import sys
from datetime import timedelta

import pytest
from loguru import logger
from pydantic import ValidationError

from flowdocs.settings import Settings
from flowdocs.utils import setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings.from_env()

    assert settings.log_level == "info"
    assert settings.server_name == "react-flow-mcp-server"
    assert settings.breaker_failure_threshold == 5
    assert settings.breaker_reset_timeout == timedelta(seconds=60)
    assert settings.cache_max_size == 500


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", "debug"), ("ERROR", "error"), (" Warn ", "warn"), ("warning", "warn")],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert Settings.from_env().log_level == expected


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    messages = []
    sink_id = logger.add(messages.append, level="WARNING")
    try:
        settings = Settings.from_env()
    finally:
        logger.remove(sink_id)

    assert settings.log_level == "info"
    assert any("verbose" in message for message in messages)


def test_direct_construction_still_rejects_invalid_level():
    with pytest.raises(ValidationError):
        Settings.model_validate({"LOG_LEVEL": "verbose"})


def test_breaker_settings_ignore_environment(monkeypatch):
    monkeypatch.setenv("BREAKER_FAILURE_THRESHOLD", "1")
    assert Settings.from_env().breaker_failure_threshold == 5


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_setup_logging_writes_to_stderr(capsys, restore_logger):
    setup_logging("warn")
    logger.info("hidden")
    logger.warning("shown")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "shown" in captured.err
    assert "hidden" not in captured.err
