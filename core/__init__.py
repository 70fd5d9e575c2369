"""Password Field Core Package.

Provides the components around the strength classifier:
- config: Centralized configuration constants
- events: Logging setup and structured strength events
- validators: Composable field validators (import core.validators)
- field: Headless password field model (import core.field)

validators and field depend on strength_classifier, which itself reads
core.config, so they are not re-exported here.
"""

# Configuration constants
from core.config import (
    LOG_DIR,
    LOG_FILE,
    EVENT_LOG_FILE,
    LOG_EVENTS,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_INPUT_LENGTH,
    CORS_ORIGINS,
    API_VERSION,
)

# Logging
from core.events import (
    configure_logging,
    log_strength_event,
    read_events,
    count_events_by_status,
)

__all__ = [
    # Config
    "LOG_DIR",
    "LOG_FILE",
    "EVENT_LOG_FILE",
    "LOG_EVENTS",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_INPUT_LENGTH",
    "CORS_ORIGINS",
    "API_VERSION",
    # Events
    "configure_logging",
    "log_strength_event",
    "read_events",
    "count_events_by_status",
]
