"""Environment-driven settings.

Values come from the process environment, optionally seeded from a
``.env`` file at the project root.

    BARBER_DATA_DIR    directory holding products.json / appointments.json
    BARBER_TIMEZONE    IANA zone used for timestamps given without an offset
    BARBER_LOG_LEVEL   default logging level for the CLI
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]

load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


def data_dir() -> Path:
    configured = os.getenv("BARBER_DATA_DIR")
    if configured:
        return Path(configured).expanduser()
    return PROJECT_ROOT / "data"


def app_timezone() -> ZoneInfo:
    tz_name = os.getenv("BARBER_TIMEZONE", "UTC")
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "Invalid timezone '%s' in BARBER_TIMEZONE, falling back to UTC", tz_name
        )
        return ZoneInfo("UTC")


def log_level() -> str:
    level = os.getenv("BARBER_LOG_LEVEL", "INFO").strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning(
            "Unknown log level '%s' in BARBER_LOG_LEVEL, falling back to INFO", level
        )
        return "INFO"
    return level
