# File: meetfinder/models/sweep.py
"""
Ephemeral values produced while sweeping optional-attendee events.
"""

from dataclasses import dataclass

from .event import Event
from .time_range import TimeRange


@dataclass(frozen=True)
class EventTimePoint:
    """One boundary (start or end) of an event on the sweep line."""
    event: Event
    is_start: bool

    @property
    def time(self) -> int:
        """Minute at which this boundary sits."""
        if self.is_start:
            return self.event.when.start
        return self.event.when.end


@dataclass(frozen=True)
class IntervalUnavailability:
    """A stretch of the day where a constant number of optional attendees are busy."""
    range: TimeRange
    unavailable_count: int

    def __str__(self) -> str:
        return f"{self.range}: {self.unavailable_count}"


def by_time(point: EventTimePoint) -> int:
    """Sort key ordering sweep points by minute."""
    return point.time
