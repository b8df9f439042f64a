"""Tests for environment configuration."""

import logging

import pytest

from termquery.core.environment import (
    LOG_LEVEL_ENV_VAR,
    LogLevel,
    get_log_level,
    parse_log_level,
)


class TestGetLogLevel:
    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert get_log_level() == LogLevel.WARNING

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert get_log_level() == LogLevel.DEBUG

    def test_case_and_whitespace_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "  INFO ")
        assert get_log_level() == LogLevel.INFO


class TestParseLogLevel:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("warn", LogLevel.WARNING),
            ("err", LogLevel.ERROR),
            ("", LogLevel.WARNING),
            (None, LogLevel.WARNING),
        ],
    )
    def test_values(self, value: str | None, expected: LogLevel) -> None:
        assert parse_log_level(value) == expected

    def test_unknown_value_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="termquery.core.environment"):
            assert parse_log_level("verbose") == LogLevel.WARNING
        assert "Unknown log level 'verbose'" in caplog.text

    def test_to_logging(self) -> None:
        assert LogLevel.DEBUG.to_logging() == logging.DEBUG
        assert LogLevel.ERROR.to_logging() == logging.ERROR
