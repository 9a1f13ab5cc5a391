"""Tests for structured logging functionality."""

from __future__ import annotations

from collections.abc import Generator
from logging import StreamHandler, getLogger, root

import pytest
from structlog.stdlib import ProcessorFormatter

from blogsite.monitoring.logging import (
    add_timestamp,
    configure_logging,
    get_logger,
    sanitize_event_dict,
    sanitize_log_message,
)


@pytest.fixture
def restore_root_logger() -> Generator[None]:
    """Drop the console handlers installed by configure_logging."""
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestSanitizeLogMessage:
    """Tests for log message sanitization."""

    def test_newlines_escaped(self) -> None:
        """Newlines should be escaped to prevent log injection."""
        result = sanitize_log_message("Line1\nLine2\rLine3")
        assert result == "Line1\\nLine2\\rLine3"

    def test_tabs_escaped_and_nulls_removed(self) -> None:
        assert sanitize_log_message("a\tb\x00c") == "a\\tbc"

    def test_normal_message_unchanged(self) -> None:
        """Normal messages should be unchanged."""
        message = "Migrating posts/2017-01-01-example-post.md"
        assert sanitize_log_message(message) == message

    def test_non_string_converted(self) -> None:
        """Non-string values should be converted to string."""
        assert sanitize_log_message(123) == "123"  # type: ignore[arg-type]


class TestProcessors:
    """Tests for the custom structlog processors."""

    def test_sanitize_event_dict_only_touches_strings(self) -> None:
        event = {"event": "Post title\ninjected", "post_id": 42}
        result = sanitize_event_dict(None, "info", event)
        assert result == {"event": "Post title\\ninjected", "post_id": 42}

    def test_add_timestamp(self) -> None:
        result = add_timestamp(None, "info", {"event": "hello"})
        assert result["event"] == "hello"
        assert len(result["timestamp"]) == len("2017-01-01 00:00:00")


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_single_structured_console_handler(self) -> None:
        """Repeated calls leave exactly one console handler on the root logger."""
        configure_logging()
        configure_logging()

        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, StreamHandler)
        assert isinstance(handler.formatter, ProcessorFormatter)

    @pytest.mark.usefixtures("restore_root_logger")
    def test_stdlib_records_are_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Records from getLogger(__name__) loggers go through the JSON renderer."""
        configure_logging()

        getLogger("blogsite.tests").warning("Failed posts/broken.md:\nbad header")

        err = capsys.readouterr().err
        assert "Failed posts/broken.md:\\\\nbad header" in err
        assert '"level": "warning"' in err

    def test_get_logger(self) -> None:
        assert get_logger("blogsite.tests") is not None
