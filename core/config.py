"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Logging and API settings can be overridden via environment variables.
"""

import os

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
LOG_FILE = os.environ.get("LOG_FILE", os.path.join(LOG_DIR, "passcheck.log"))
EVENT_LOG_FILE = os.environ.get("EVENT_LOG_FILE", os.path.join(LOG_DIR, "strength_events.jsonl"))
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 5 * 1024 * 1024))  # 5MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 3))

# Strength events are off unless explicitly enabled
LOG_EVENTS = os.environ.get("LOG_EVENTS", "false").lower() == "true"

# Password field rules
MIN_PASSWORD_LENGTH = 8

# Upper bound on what the API will accept in a request body
MAX_PASSWORD_INPUT_LENGTH = int(os.environ.get("MAX_PASSWORD_INPUT_LENGTH", "1024"))
if MAX_PASSWORD_INPUT_LENGTH < MIN_PASSWORD_LENGTH:
    raise ValueError(
        f"MAX_PASSWORD_INPUT_LENGTH must be at least {MIN_PASSWORD_LENGTH}"
    )

# CORS configuration
# Set CORS_ORIGINS to a comma-separated list of origins allowed to call the API
# Example: CORS_ORIGINS=http://localhost:4200,https://app.example.com
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:4200,http://127.0.0.1:4200")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

API_VERSION = "1.0.0"
