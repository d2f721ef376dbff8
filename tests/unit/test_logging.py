"""Tests for structured logging."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from urlformat.errors import MissingSubstitution
from urlformat.formatter import format_url
from urlformat.observability.logging import HANDLER_NAME, get_logger, setup_logging
from urlformat.template import resolve_template


def _remove_setup_handler() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


class TestSetupLogging:
    """Tests for setup_logging."""

    def teardown_method(self) -> None:
        structlog.reset_defaults()
        _remove_setup_handler()

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="INFO", format="json")
        get_logger("test").info("hello", answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="WARNING", format="console")
        get_logger("test").debug("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        setup_logging()
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(HANDLER_NAME) == 1

    def test_library_events_emitted_once_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="DEBUG", format="json")
        format_url("https://x.test", "/u")
        assert '"event": "url_formatted"' in capsys.readouterr().err


class TestSilentByDefault:
    """Without setup_logging the library writes nothing."""

    def test_format_url_writes_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        format_url("https://x.test", "/u/:a", {"a": "1", "b": "2"}, {"q": "1"})
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger("urlformat").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestFormatterEvents:
    """Tests for the events the pipeline emits."""

    def test_missing_substitution_not_logged(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(MissingSubstitution):
                resolve_template("/:name", {})
        assert logs == []

    def test_unused_substitutions_logged(self) -> None:
        with capture_logs() as logs:
            resolve_template("/:a", {"a": "1", "b": "2"})
        assert {"event": "unused_substitutions", "identifiers": ["b"], "log_level": "debug"} in logs

    def test_formatted_event_fields(self) -> None:
        with capture_logs() as logs:
            format_url("https://secret.test", "/u", None, {"token": "abc"})
        event = next(e for e in logs if e["event"] == "url_formatted")
        assert "abc" not in str(event)
        assert "secret" not in str(event)
        assert event["has_path"] is True
        assert event["has_query"] is True
