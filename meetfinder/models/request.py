# File: meetfinder/models/request.py

from dataclasses import dataclass
from typing import FrozenSet

from .errors import InvalidRequestError


@dataclass(frozen=True)
class MeetingRequest:
    """A meeting to place: who must come, who may come, and for how long."""
    mandatory_attendees: FrozenSet[str]
    optional_attendees: FrozenSet[str]
    duration: int

    def __post_init__(self):
        """Validate duration and freeze attendee collections."""
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidRequestError(f"Meeting duration must be an int, got {self.duration!r}")
        if self.duration <= 0:
            raise InvalidRequestError(f"Meeting duration must be positive, got {self.duration}")

        for name in ('mandatory_attendees', 'optional_attendees'):
            value = getattr(self, name)
            if isinstance(value, str):
                raise InvalidRequestError(f"{name} must be a collection of names, not a string")
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

    @property
    def has_mandatory_attendees(self) -> bool:
        return bool(self.mandatory_attendees)
