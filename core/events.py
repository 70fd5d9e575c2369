"""Logging setup and structured strength events.

Application logs go through the standard logging module to a rotating file.
Strength events are written as JSON lines for later analysis. Events carry
the strength label and the password length, never the password itself.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core import config


logger = logging.getLogger(__name__)

# Module-level state
_logging_configured = False
_config_lock = Lock()

EVENT_LOGGER_NAME = "passcheck.events"


def ensure_log_directory(path: str) -> None:
    """Create the parent directory of a log file if needed."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application and event logging with rotation on first use."""
    global _logging_configured
    with _config_lock:
        if _logging_configured:
            return

        ensure_log_directory(config.LOG_FILE)
        handler = RotatingFileHandler(
            config.LOG_FILE,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

        root = logging.getLogger()
        root.setLevel(level)
        root.addHandler(handler)

        # Events get their own file with bare JSON lines
        ensure_log_directory(config.EVENT_LOG_FILE)
        event_handler = RotatingFileHandler(
            config.EVENT_LOG_FILE,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        event_handler.setFormatter(logging.Formatter('%(message)s'))

        event_logger = logging.getLogger(EVENT_LOGGER_NAME)
        event_logger.setLevel(logging.INFO)
        event_logger.addHandler(event_handler)
        event_logger.propagate = False

        _logging_configured = True
        logger.info("Logging configured: %s", config.LOG_FILE)


def build_event(
    event_type: str,
    status: str,
    source: str = "passcheck",
    details: Optional[dict] = None
) -> dict:
    """Build an event dictionary.

    Args:
        event_type: Type of event (e.g., 'strength_change', 'classify')
        status: Event status, usually the strength label
        source: Component that emitted the event
        details: Optional additional event details

    Returns:
        Event dictionary ready for JSON serialization
    """
    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": source,
    }

    if details:
        event["details"] = details

    return event


def log_strength_event(
    label: Optional[str],
    password_length: int,
    source: str = "passcheck",
    event_type: str = "classify",
) -> Optional[dict]:
    """Log a strength classification as a JSON event.

    Does nothing unless LOG_EVENTS is enabled.

    Args:
        label: Strength label value, or None when no tier matched
        password_length: Length of the classified password
        source: Component that classified the password
        event_type: Type of event

    Returns:
        The event that was logged, or None if events are disabled
    """
    if not config.LOG_EVENTS:
        return None

    event = build_event(
        event_type,
        status=label if label is not None else "none",
        source=source,
        details={"length": password_length},
    )
    logging.getLogger(EVENT_LOGGER_NAME).info(json.dumps(event, ensure_ascii=False))
    return event


def read_events(limit: int = 100, path: Optional[str] = None) -> list[dict]:
    """Read and parse logged strength events.

    Args:
        limit: Maximum number of events to return
        path: Event log file, defaults to EVENT_LOG_FILE

    Returns:
        List of parsed event dictionaries, oldest first
    """
    path = path or config.EVENT_LOG_FILE
    if not os.path.exists(path):
        return []

    events = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                logger.warning("Skipping malformed event line in %s", path)
                continue

    return events[-limit:]


def count_events_by_status(events: list[dict]) -> dict[str, int]:
    """Count events grouped by status."""
    counts = {}
    for event in events:
        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1
    return counts
