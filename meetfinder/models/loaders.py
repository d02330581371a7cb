# File: meetfinder/models/loaders.py
"""
Factory functions building models from plain dictionaries (JSON records).
"""

from typing import Any, Dict, Iterable

from .common import parse_minutes
from .errors import CalendarFormatError
from .event import Event
from .request import MeetingRequest
from .time_range import TimeRange


def _names(raw: Any, field_name: str) -> frozenset:
    if raw is None:
        return frozenset()
    if isinstance(raw, str) or not isinstance(raw, Iterable):
        raise CalendarFormatError(f"'{field_name}' must be a list of names, got {raw!r}")
    return frozenset(str(name).strip() for name in raw if str(name).strip())


def event_from_dict(data: Dict[str, Any]) -> Event:
    """Create Event from dictionary."""
    title = str(data.get('title', 'Untitled Event'))
    try:
        start = parse_minutes(data['start'])
        if 'end' in data:
            end = parse_minutes(data['end'])
        else:
            end = start + int(data['duration'])
    except KeyError as e:
        raise CalendarFormatError(f"Event '{title}' is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise CalendarFormatError(f"Event '{title}' has an unreadable time: {e}") from e

    return Event(
        title=title,
        when=TimeRange(start, end),
        attendees=_names(data.get('attendees'), 'attendees'),
    )


def meeting_request_from_dict(data: Dict[str, Any]) -> MeetingRequest:
    """Create MeetingRequest from dictionary.

    Mandatory attendees are read from 'attendees' (or 'mandatory_attendees').
    """
    mandatory = data.get('attendees', data.get('mandatory_attendees'))
    if 'duration' not in data:
        raise CalendarFormatError("Meeting request is missing field 'duration'")
    try:
        duration = int(data['duration'])
    except (TypeError, ValueError) as e:
        raise CalendarFormatError(f"Meeting duration is not a number: {data['duration']!r}") from e

    return MeetingRequest(
        mandatory_attendees=_names(mandatory, 'attendees'),
        optional_attendees=_names(data.get('optional_attendees'), 'optional_attendees'),
        duration=duration,
    )
