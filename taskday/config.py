"""Application configuration - single source of truth for all constants.

Contains the RecurrenceKind enum, date format, limits and the environment
driven settings (database path, HTTP host/port, web directory, log level).
Import from here instead of hardcoding values elsewhere.
"""
import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env")


class RecurrenceKind(Enum):
    """Enum for recurrence rule variants."""
    YEARLY = "y"
    DAYS = "d"
    WEEKDAYS = "w"


DATE_FORMAT = "%Y%m%d"
DATE_LENGTH = 8

MIN_DAY_INTERVAL = 1
MAX_DAY_INTERVAL = 400
MIN_WEEKDAY = 1
MAX_WEEKDAY = 7

TASK_LIST_LIMIT = 50

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when an environment setting has an unusable value."""
    pass


def read_port(name: str, default: int) -> int:
    """Read a TCP port from the environment variable ``name``."""
    raw = os.getenv(name, "") or str(default)
    if not (raw.isascii() and raw.isdigit()) or not 0 < int(raw) < 65536:
        raise ConfigError(f"{name} must be a port number between 1 and 65535, got {raw!r}")
    return int(raw)


def read_log_level(name: str, default: str) -> str:
    """Read a logging level name from the environment variable ``name``."""
    level = (os.getenv(name, "") or default).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{name} must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return level


DB_PATH = Path(os.getenv("TASKDAY_DB_PATH", "") or "scheduler.db")
WEB_DIR = Path(os.getenv("TASKDAY_WEB_DIR", "") or "web")
HOST = os.getenv("TASKDAY_HOST", "") or "0.0.0.0"
PORT = read_port("TASKDAY_PORT", 7540)
LOG_LEVEL = read_log_level("TASKDAY_LOG_LEVEL", "INFO")
