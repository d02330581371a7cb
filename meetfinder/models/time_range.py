# File: meetfinder/models/time_range.py
"""
Half-open interval of minutes within a single day.

All relationship predicates used by the scheduler live here so that the
four overlap cases are defined against one set of endpoint rules.
"""

from dataclasses import dataclass

from .common import START_OF_DAY, END_OF_DAY, format_minutes
from .errors import InvalidRangeError


@dataclass(frozen=True)
class TimeRange:
    """Represents the minutes [start, end) of a day."""
    start: int
    end: int

    def __post_init__(self):
        """Validate bounds."""
        for name, value in (("start", self.start), ("end", self.end)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRangeError(f"Range {name} must be an int minute, got {value!r}")
        if self.start < START_OF_DAY or self.end > END_OF_DAY:
            raise InvalidRangeError(
                f"Range [{self.start}, {self.end}) falls outside the day "
                f"[{START_OF_DAY}, {END_OF_DAY}]"
            )
        if self.start > self.end:
            raise InvalidRangeError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> 'TimeRange':
        """Create a range from two endpoints; inclusive ranges own the end minute too."""
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> 'TimeRange':
        """Create a range starting at start and lasting duration minutes."""
        return cls(start, start + duration)

    def duration(self) -> int:
        """Length of the range in minutes."""
        return self.end - self.start

    def contains_point(self, minute: int) -> bool:
        """Check if a single minute falls inside this range."""
        return self.start <= minute < self.end

    def overlaps(self, other: 'TimeRange') -> bool:
        """Check if this range shares any minute with another."""
        return self.contains_point(other.start) or other.contains_point(self.start)

    def contains(self, other: 'TimeRange') -> bool:
        """Check if other lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end

    def overlaps_before(self, other: 'TimeRange') -> bool:
        """Starts at or before other and ends strictly inside it."""
        return self.start <= other.start and other.start < self.end < other.end

    def starts_on_or_before_ends_on_or_after(self, other: 'TimeRange') -> bool:
        """Fully covers other."""
        return self.start <= other.start and self.end >= other.end

    def starts_during_ends_on_or_after(self, other: 'TimeRange') -> bool:
        """Starts strictly inside other and runs to its end or beyond."""
        return other.start < self.start < other.end and self.end >= other.end

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'start': self.start,
            'end': self.end,
            'duration': self.duration(),
            'label': str(self),
        }

    def __str__(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)}"


WHOLE_DAY = TimeRange(START_OF_DAY, END_OF_DAY)
