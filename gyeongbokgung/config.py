"""
Runtime configuration - read from the environment and an optional .env file
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

UI_MODES = ("tui", "console")

_TRUTHY = {"1", "true", "yes", "on"}


def get_ui_mode() -> str:
    """Get the host to run: 'tui' or 'console'"""
    mode = os.getenv("GYEONGBOKGUNG_UI", "tui").strip().lower()
    if mode not in UI_MODES:
        raise ValueError(f"Invalid GYEONGBOKGUNG_UI: {mode!r} (expected one of {', '.join(UI_MODES)})")
    return mode


def get_log_dir() -> Path:
    """Get the directory for session log files"""
    return Path(os.getenv("GYEONGBOKGUNG_LOG_DIR", "logs"))


def get_debug() -> bool:
    """Whether debug logging is enabled"""
    return os.getenv("GYEONGBOKGUNG_DEBUG", "").strip().lower() in _TRUTHY
