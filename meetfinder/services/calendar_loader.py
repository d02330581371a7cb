# File: meetfinder/services/calendar_loader.py

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Tuple

from meetfinder.core.config_manager import Config
from meetfinder.models import (
    CalendarFormatError, Event, MeetingRequest, TimeRange,
    event_from_dict, meeting_request_from_dict,
)
from meetfinder.utils.logger import setup_logger

logger = setup_logger(__name__)


class CalendarLoader:
    """Reads a day's events and a meeting request from a JSON calendar file."""

    def __init__(self, path: Path = Config.CALENDAR_FILE):
        """
        Initialize the loader.

        Args:
            path: JSON file holding {"events": [...], "request": {...}}
        """
        self.path = Path(path)

    def load(self) -> Tuple[List[Event], MeetingRequest]:
        """
        Load and convert the calendar document into models.

        Returns:
            Tuple of (events, request)

        Raises:
            FileNotFoundError: If the calendar file does not exist
            CalendarFormatError: If the document is malformed
        """
        logger.info(f"Loading calendar from {self.path}")
        with open(self.path, 'r', encoding='utf-8') as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise CalendarFormatError(f"{self.path} is not valid JSON: {e}") from e

        return self.parse(document)

    @staticmethod
    def parse(document: Dict[str, Any]) -> Tuple[List[Event], MeetingRequest]:
        """Convert an already-decoded calendar document into models."""
        if not isinstance(document, dict):
            raise CalendarFormatError("Calendar document must be a JSON object")
        if 'request' not in document:
            raise CalendarFormatError("Calendar document has no 'request' section")

        raw_events = document.get('events', [])
        if not isinstance(raw_events, list):
            raise CalendarFormatError("'events' must be a list")

        events: List[Event] = []
        for index, raw_event in enumerate(raw_events):
            if not isinstance(raw_event, dict):
                raise CalendarFormatError(f"Event #{index} is not an object")
            events.append(event_from_dict(raw_event))

        raw_request = document['request']
        if not isinstance(raw_request, dict):
            raise CalendarFormatError("'request' must be an object")
        request = meeting_request_from_dict(raw_request)

        logger.info(f"Loaded {len(events)} events and a {request.duration}-minute request")
        return events, request


def save_windows(windows: List[TimeRange], filepath: Path = Config.WINDOWS_OUTPUT_FILE) -> Path:
    """
    Save meeting windows to a JSON file.

    Args:
        windows: Windows returned by the scheduler
        filepath: Output file path

    Returns:
        The path written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    data_to_save = {
        "windows": [window.to_dict() for window in windows],
        "generated_at": datetime.now().isoformat(),
    }
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data_to_save, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved {len(windows)} windows to {filepath}")
    return filepath
