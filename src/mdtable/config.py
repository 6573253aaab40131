"""Shared configuration for the Markdown table editor.

Values are read from the environment (and ``ROOT/.env`` if present) once at
import time.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read an integer variable, falling back to *default* and clamping to *minimum*."""
    raw = os.getenv(name, "")
    try:
        value = int(raw) if raw.strip() else default
    except ValueError:
        value = default
    return max(minimum, value)


def _env_float(name: str, default: float) -> float:
    """Read a non-negative float variable, falling back to *default*."""
    raw = os.getenv(name, "")
    try:
        value = float(raw) if raw.strip() else default
    except ValueError:
        value = default
    return max(0.0, value)


def _env_log_level(name: str, default: str = "INFO") -> str:
    """Read a logging level name, falling back to *default* when it is unknown."""
    value = os.getenv(name, default).strip().upper()
    return value if isinstance(logging.getLevelName(value), int) else default


# Shape of the table created at startup (and on reset)
DEFAULT_COLUMNS = _env_int("MDTABLE_DEFAULT_COLUMNS", 3)
DEFAULT_ROWS = _env_int("MDTABLE_DEFAULT_ROWS", 2)

# How long the "copied" notification stays visible
NOTIFICATION_SECONDS = _env_float("MDTABLE_NOTIFICATION_SECONDS", 2.0)

# Web server binding
HOST = os.getenv("MDTABLE_HOST", "127.0.0.1")
PORT = _env_int("MDTABLE_PORT", 8000)

LOG_LEVEL = _env_log_level("MDTABLE_LOG_LEVEL")
