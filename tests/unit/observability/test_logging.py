"""Tests for logging configuration and formatters."""

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from streamcache.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


def make_record(msg: str = "Cache miss", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="streamcache.strategy.get_only",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonFormatter:
    """Test JSON log output."""

    def test_basic_fields(self) -> None:
        data = json.loads(JsonFormatter().format(make_record()))
        assert data["level"] == "WARNING"
        assert data["logger"] == "streamcache.strategy.get_only"
        assert data["message"] == "Cache miss"
        assert data["line"] == 10
        assert "timestamp" in data

    def test_extra_fields_included(self) -> None:
        data = json.loads(JsonFormatter().format(make_record(cache_key="token")))
        assert data["cache_key"] == "token"

    def test_unserializable_extra_is_stringified(self) -> None:
        data = json.loads(JsonFormatter().format(make_record(shape=object)))
        assert data["shape"] == str(object)

    def test_exception_info(self) -> None:
        try:
            raise ValueError("bad value")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad value"


class TestConsoleFormatter:
    """Test console log output."""

    def test_includes_cache_key(self) -> None:
        line = ConsoleFormatter(use_colors=False).format(make_record(cache_key="token"))
        assert "| WARNING  | streamcache.strategy.get_only | Cache miss | key=token" in line

    def test_without_cache_key(self) -> None:
        line = ConsoleFormatter(use_colors=False).format(make_record())
        assert line.endswith("| Cache miss")


class TestConfigureLogging:
    """Test root logger configuration."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_json_format(self) -> None:
        configure_logging(json_format=True, level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    @pytest.mark.usefixtures("restore_root_logger")
    def test_console_format(self) -> None:
        configure_logging(json_format=False, level="warning")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, ConsoleFormatter)

    @pytest.mark.usefixtures("restore_root_logger")
    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from streamcache.config import settings

        monkeypatch.setattr(settings, "log_json", True)
        monkeypatch.setattr(settings, "log_level", "ERROR")
        configure_logging_from_settings()

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_get_logger(self) -> None:
        assert get_logger("streamcache.test") is logging.getLogger("streamcache.test")
