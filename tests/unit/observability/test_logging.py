"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from librarium.observability.logging import JsonLoggerFactory, drop_empty_values, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestDropEmptyValues:
    def test_removes_none(self) -> None:
        assert drop_empty_values(None, "info", {"event": "e", "genre": None, "page": 1}) == {
            "event": "e",
            "page": 1,
        }

    def test_keeps_falsy_non_none(self) -> None:
        assert drop_empty_values(None, "info", {"event": "e", "count": 0, "q": ""}) == {
            "event": "e",
            "count": 0,
            "q": "",
        }


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_logger("test", component="repo").info("hello", page=2)
        assert captured == [{"component": "repo", "page": 2, "event": "hello", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("librarium.test").info("library.authors.query", genre=None, total_count=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "library.authors.query"
        assert payload["total_count"] == 3
        assert payload["level"] == "info"
        assert "genre" not in payload

    def test_level_from_string(self) -> None:
        JsonLoggerFactory.configure("debug", json=False)
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        JsonLoggerFactory.configure("chatty")
        assert logging.getLogger().level == logging.INFO
