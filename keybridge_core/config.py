# keybridge_core/config.py
import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "KEYBRIDGE_LOG_LEVEL"
LOG_FILE_ENV = "KEYBRIDGE_LOG_FILE"


def get_log_level() -> int:
    """
    Level for keybridge loggers, from KEYBRIDGE_LOG_LEVEL.
    Accepts level names ("debug", "WARNING") or numeric values; anything
    unrecognised falls back to INFO.
    """
    raw = os.getenv(LOG_LEVEL_ENV, "INFO").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def get_log_file() -> Optional[str]:
    return os.getenv(LOG_FILE_ENV) or None
