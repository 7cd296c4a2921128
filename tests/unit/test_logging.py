"""Tests for typedgeom.utils.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from typedgeom.num import cast_scalar
from typedgeom.utils.logging import configure_logging, get_logger


def _read_last_json_log_line(capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    captured = capsys.readouterr()
    lines = [line for line in captured.out.splitlines() if line.strip()]
    assert lines, "Expected at least one log line on stdout"
    return json.loads(lines[-1])


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="WARNING", log_format="console")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_default_settings_do_not_error() -> None:
    configure_logging()


def test_get_logger_returns_logger_proxy() -> None:
    configure_logging(level="DEBUG", log_format="console")
    logger = get_logger("test.module")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")


def test_json_log_is_valid(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="INFO", log_format="json")

    logger = get_logger("test.json")
    logger.info("hello", foo="bar")
    payload = _read_last_json_log_line(capsys)

    assert payload["event"] == "hello"
    assert payload["foo"] == "bar"
    assert payload["level"] == "info"
    assert payload["logger"] == "test.json"
    assert "timestamp" in payload


def test_library_logs_unrepresentable_cast(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="typedgeom.num"):
        assert cast_scalar(float("inf"), int) is None

    assert "Unrepresentable cast" in caplog.text
    assert caplog.records[-1].name == "typedgeom.num"


def test_library_silent_on_successful_cast(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="typedgeom.num"):
        assert cast_scalar(2.0, int) == 2

    assert caplog.records == []
