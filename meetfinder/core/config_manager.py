# File: meetfinder/core/config_manager.py
"""
Centralized configuration management for the meeting finder.
Loads settings from environment variables (and a local .env file).
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from meetfinder/core/

    OUTPUT_DIR = Path(os.getenv("MEETFINDER_OUTPUT_DIR", BASE_DIR / "output"))
    LOGS_DIR = Path(os.getenv("MEETFINDER_LOGS_DIR", BASE_DIR / "logs"))

    # Files
    CALENDAR_FILE = Path(os.getenv("MEETFINDER_CALENDAR_FILE", BASE_DIR / "calendar.json"))
    WINDOWS_OUTPUT_FILE = OUTPUT_DIR / "meeting_windows.json"

    # Logging
    LOG_LEVEL = os.getenv("MEETFINDER_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("MEETFINDER_LOG_TO_FILE")

    @classmethod
    def log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant, falling back to INFO."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def validate(cls, calendar_file: Optional[Path] = None) -> bool:
        """
        Validate configuration before a run.

        Args:
            calendar_file: Calendar the run will read; defaults to CALENDAR_FILE
        """
        calendar_file = calendar_file or cls.CALENDAR_FILE
        errors: List[str] = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"MEETFINDER_LOG_LEVEL '{cls.LOG_LEVEL}' is not a logging level")

        if not calendar_file.exists():
            errors.append(f"calendar file not found at {calendar_file}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
