"""Tests for logging setup and strength events."""

import json
import logging

import pytest

from core import config, events
from core.events import (
    EVENT_LOGGER_NAME,
    build_event,
    configure_logging,
    count_events_by_status,
    log_strength_event,
    read_events,
)


@pytest.fixture
def log_files(tmp_path, monkeypatch):
    """Point logging at a temp directory and undo handler setup afterwards."""
    log_file = tmp_path / "logs" / "app.log"
    event_file = tmp_path / "logs" / "events.jsonl"
    monkeypatch.setattr(config, "LOG_FILE", str(log_file))
    monkeypatch.setattr(config, "EVENT_LOG_FILE", str(event_file))
    monkeypatch.setattr(config, "LOG_EVENTS", True)
    monkeypatch.setattr(events, "_logging_configured", False)

    root = logging.getLogger()
    event_logger = logging.getLogger(EVENT_LOGGER_NAME)
    root_handlers = list(root.handlers)
    root_level = root.level

    yield log_file, event_file

    for handler in list(root.handlers):
        if handler not in root_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in list(event_logger.handlers):
        event_logger.removeHandler(handler)
        handler.close()
    root.setLevel(root_level)
    event_logger.propagate = True


class TestBuildEvent:
    """Test event structure."""

    def test_fields(self):
        event = build_event("classify", "strong", source="api", details={"length": 8})
        assert event["event_type"] == "classify"
        assert event["status"] == "strong"
        assert event["source"] == "api"
        assert event["details"] == {"length": 8}
        assert "timestamp" in event

    def test_no_details(self):
        assert "details" not in build_event("classify", "easy")


class TestLogStrengthEvent:
    """Test strength event logging."""

    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_EVENTS", False)
        assert log_strength_event("easy", 8) is None

    def test_logs_json(self, monkeypatch, caplog):
        monkeypatch.setattr(config, "LOG_EVENTS", True)
        with caplog.at_level(logging.INFO, logger=EVENT_LOGGER_NAME):
            event = log_strength_event("medium", 10, source="api")

        assert event["status"] == "medium"
        assert event["details"] == {"length": 10}
        logged = json.loads(caplog.records[-1].getMessage())
        assert logged["status"] == "medium"
        assert logged["source"] == "api"

    def test_no_tier_status(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_EVENTS", True)
        assert log_strength_event(None, 8)["status"] == "none"


class TestConfigureLogging:
    """Test file logging and reading events back."""

    def test_writes_event_file(self, log_files):
        log_file, event_file = log_files
        configure_logging()
        log_strength_event("strong", 12, source="cli")
        log_strength_event("easy", 8, source="cli")

        for handler in logging.getLogger(EVENT_LOGGER_NAME).handlers:
            handler.flush()

        assert log_file.exists()
        found = read_events(path=str(event_file))
        assert [e["status"] for e in found] == ["strong", "easy"]

    def test_configure_once(self, log_files):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger(EVENT_LOGGER_NAME).handlers) == 1


class TestReadEvents:
    """Test parsing the event file."""

    def test_missing_file(self, tmp_path):
        assert read_events(path=str(tmp_path / "none.jsonl")) == []

    def test_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text('{"status": "easy"}\nnot json\n{"status": "strong"}\n', encoding="utf-8")
        assert [e["status"] for e in read_events(path=str(path))] == ["easy", "strong"]

    def test_limit(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text("".join(f'{{"status": "s{i}"}}\n' for i in range(5)), encoding="utf-8")
        assert [e["status"] for e in read_events(limit=2, path=str(path))] == ["s3", "s4"]

    def test_count_by_status(self):
        counts = count_events_by_status([{"status": "easy"}, {"status": "easy"}, {}])
        assert counts == {"easy": 2, "UNKNOWN": 1}
