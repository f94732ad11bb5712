"""Configuration constants for the Bitcoin ladder scanner."""

from __future__ import annotations

# Logging configuration, the log directory is resolved against the working directory
LOGS_DIR_NAME = "logs"
LOG_FILE_NAME = "ladder_scanner.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

# Polymarket web configuration
POLYMARKET_WEB_URL = "https://polymarket.com"
USER_AGENT = "Mozilla/5.0"
REQUEST_TIMEOUT = 30.0  # Seconds, applied by httpx to connect/read/write/pool

# Known parent event slug for the January 14 ladder
BITCOIN_LADDER_EVENT_SLUG = "bitcoin-above-on-january-14"

# Ladder matching rules
LADDER_SLUG_PREFIX = "bitcoin-above"
LADDER_DATE_SLUG = "january-14"
LADDER_DATE_TEXT = "january 14"

# Scheduler
POLL_INTERVAL_SECONDS = 5.0
