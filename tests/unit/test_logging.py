"""Tests for logging utilities."""

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from fuzzy_index.search import FieldDefinition, SearchIndex, SearchOptions
from fuzzy_index.utils.logging import (
    ConsoleFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


class RecordingHandler(logging.Handler):
    """Keeps every record it receives."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def recorder() -> Generator[RecordingHandler, None, None]:
    """Attach a recording handler to the package logger at DEBUG."""
    package_logger = logging.getLogger("fuzzy_index")
    handler = RecordingHandler()
    level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    yield handler
    package_logger.removeHandler(handler)
    package_logger.setLevel(level)


def make_record(message: str, **context: object) -> logging.LogRecord:
    record = logging.LogRecord("fuzzy_index.test", logging.INFO, __file__, 10, message, None, None)
    if context:
        record.context = context
    return record


class TestJSONFormatter:
    """Tests for the JSON log formatter."""

    def test_format(self) -> None:
        """Test records become JSON with their context merged in."""
        output = json.loads(JSONFormatter().format(make_record("Built", objects=5)))

        assert output["level"] == "INFO"
        assert output["logger"] == "fuzzy_index.test"
        assert output["message"] == "Built"
        assert output["objects"] == 5
        assert "timestamp" in output

    def test_format_without_context(self) -> None:
        """Test records without context still format."""
        output = json.loads(JSONFormatter().format(make_record("Plain")))
        assert output["message"] == "Plain"


class TestConsoleFormatter:
    """Tests for the console log formatter."""

    def test_plain(self) -> None:
        """Test uncolored output with trailing context."""
        line = ConsoleFormatter(use_color=False).format(make_record("Search complete", results=2))
        assert line == "INFO     fuzzy_index.test: Search complete (results=2)"

    def test_color(self) -> None:
        """Test the level is wrapped in ANSI codes."""
        line = ConsoleFormatter(use_color=True).format(make_record("Hello"))
        assert line.startswith("\033[32mINFO")
        assert "\033[0m" in line


class TestLogWithContext:
    """Tests for log_with_context."""

    def test_context_attached(self, recorder: RecordingHandler) -> None:
        """Test context travels on the record."""
        log_with_context(get_logger("fuzzy_index.test"), logging.INFO, "Hello", key="value")

        assert len(recorder.records) == 1
        assert recorder.records[0].context == {"key": "value"}  # type: ignore[attr-defined]

    def test_disabled_level_skipped(self, recorder: RecordingHandler) -> None:
        """Test nothing is logged below the logger level."""
        logging.getLogger("fuzzy_index").setLevel(logging.WARNING)
        log_with_context(get_logger("fuzzy_index.test"), logging.DEBUG, "Hidden")

        assert recorder.records == []

    def test_search_logs(self, recorder: RecordingHandler) -> None:
        """Test building and searching an index log at debug level."""
        index = SearchIndex(["apple"], [FieldDefinition(lambda v: v)])
        index.search(["apple"], SearchOptions(threshold=0.2))

        messages = [record.getMessage() for record in recorder.records]
        assert messages == ["Built search index", "Search complete"]
        assert recorder.records[1].context["results"] == 1  # type: ignore[attr-defined]


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore(self) -> Generator[None, None, None]:
        package_logger = logging.getLogger("fuzzy_index")
        handlers = list(package_logger.handlers)
        level = package_logger.level
        yield
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers = handlers
        package_logger.setLevel(level)
        package_logger.propagate = True

    def test_file_logging(self, temp_dir: Path) -> None:
        """Test log files receive JSON lines."""
        log_file = temp_dir / "logs" / "fuzzy.log"
        package_logger = setup_logging(level="info", log_file=log_file, use_color=False)

        log_with_context(get_logger("fuzzy_index.test"), logging.INFO, "Written", n=1)
        for handler in package_logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "Written"
        assert entry["n"] == 1
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False

    def test_json_console(self) -> None:
        """Test the console handler can emit JSON."""
        package_logger = setup_logging(level="DEBUG", json_format=True)

        formatters = [type(handler.formatter) for handler in package_logger.handlers]
        assert formatters == [JSONFormatter]

    def test_reconfigure_closes_handlers(self, temp_dir: Path) -> None:
        """Test calling setup_logging again closes the previous file handler."""
        package_logger = setup_logging(level="INFO", log_file=temp_dir / "first.log")
        first = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]

        setup_logging(level="DEBUG", log_file=temp_dir / "second.log")

        assert len(first) == 1
        assert first[0].stream is None
        assert first[0] not in package_logger.handlers
