# File: meetfinder/models/event.py

from dataclasses import dataclass, replace
from typing import AbstractSet, FrozenSet, Iterable

from .time_range import TimeRange


@dataclass(frozen=True)
class Event:
    """Represents an existing calendar event for the day."""
    title: str
    when: TimeRange
    attendees: FrozenSet[str] = frozenset()

    def __post_init__(self):
        """Freeze the attendee collection."""
        if not isinstance(self.when, TimeRange):
            raise TypeError(f"Event '{self.title}' needs a TimeRange, got {type(self.when).__name__}")
        if not isinstance(self.attendees, frozenset):
            object.__setattr__(self, 'attendees', frozenset(self.attendees))

    def with_attendees(self, attendees: Iterable[str]) -> 'Event':
        """Return a copy of this event carrying a different attendee set."""
        return replace(self, attendees=frozenset(attendees))

    def involves_any(self, people: AbstractSet[str]) -> bool:
        """Check if at least one of the given people attends this event."""
        return not self.attendees.isdisjoint(people)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'title': self.title,
            'start': self.when.start,
            'end': self.when.end,
            'attendees': sorted(self.attendees),
        }


def by_start(event: Event) -> int:
    """Sort key ordering events by start minute."""
    return event.when.start
