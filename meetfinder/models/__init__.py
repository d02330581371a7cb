from .common import START_OF_DAY, END_OF_DAY, parse_minutes, format_minutes
from .errors import MeetingFinderError, InvalidRangeError, InvalidRequestError, CalendarFormatError
from .time_range import TimeRange, WHOLE_DAY
from .event import Event, by_start
from .request import MeetingRequest
from .sweep import EventTimePoint, IntervalUnavailability, by_time
from .loaders import event_from_dict, meeting_request_from_dict

__all__ = [
    "START_OF_DAY",
    "END_OF_DAY",
    "parse_minutes",
    "format_minutes",
    "MeetingFinderError",
    "InvalidRangeError",
    "InvalidRequestError",
    "CalendarFormatError",
    "TimeRange",
    "WHOLE_DAY",
    "Event",
    "by_start",
    "MeetingRequest",
    "EventTimePoint",
    "IntervalUnavailability",
    "by_time",
    "event_from_dict",
    "meeting_request_from_dict"
]
