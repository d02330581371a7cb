# File: meetfinder/models/common.py

import re
from typing import Union

START_OF_DAY = 0
END_OF_DAY = 24 * 60

_CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_minutes(value: Union[int, str]) -> int:
    """Parse a minute-of-day given as an int or an 'HH:MM' string."""
    if isinstance(value, bool):
        raise ValueError(f"Not a time of day: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit():
            return int(stripped)
        match = _CLOCK_PATTERN.match(stripped)
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
            if minutes >= 60:
                raise ValueError(f"Minutes out of range in {value!r}")
            return hours * 60 + minutes
    raise ValueError(f"Not a time of day: {value!r}")


def format_minutes(minutes: int) -> str:
    """Format a minute-of-day as 'HH:MM' (1440 renders as '24:00')."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
