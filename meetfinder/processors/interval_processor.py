# File: meetfinder/processors/interval_processor.py
"""
Interval processing module.
Merges mandatory-attendee busy time and derives the free gaps of the day.
"""

from typing import Iterable, List, Tuple

from meetfinder.models import Event, MeetingRequest, TimeRange, START_OF_DAY, END_OF_DAY, by_start
from meetfinder.utils.logger import setup_logger

logger = setup_logger(__name__)


def merge_ranges(ranges: Iterable[TimeRange]) -> Tuple[TimeRange, ...]:
    """
    Merge overlapping ranges into a sorted, pairwise-disjoint tuple.

    Ranges that merely touch ([60, 90) and [90, 120)) stay separate.

    Example:
        >>> merge_ranges([TimeRange(0, 30), TimeRange(15, 45), TimeRange(60, 90)])
        (TimeRange(start=0, end=45), TimeRange(start=60, end=90))
    """
    merged: List[TimeRange] = []
    for current in sorted(ranges, key=lambda r: r.start):
        if merged and merged[-1].overlaps(current):
            last = merged[-1]
            merged[-1] = TimeRange(last.start, max(last.end, current.end))
        else:
            merged.append(current)
    return tuple(merged)


def merge_busy_ranges(events: Iterable[Event], request: MeetingRequest) -> Tuple[TimeRange, ...]:
    """
    Collect the time blocked by events involving at least one mandatory attendee.

    Args:
        events: All events of the day, in any order
        request: The meeting request

    Returns:
        Disjoint busy ranges sorted by start
    """
    blocking = [
        event.when
        for event in sorted(events, key=by_start)
        if event.involves_any(request.mandatory_attendees)
    ]
    busy = merge_ranges(blocking)
    logger.debug(f"Merged {len(blocking)} mandatory events into {len(busy)} busy ranges")
    return busy


def free_gaps(busy: Iterable[TimeRange], duration: int) -> List[TimeRange]:
    """
    Walk the gaps around the busy ranges and keep those long enough for the meeting.

    Args:
        busy: Disjoint busy ranges sorted by start
        duration: Required meeting length in minutes

    Returns:
        Available ranges in start order
    """
    available: List[TimeRange] = []
    start = START_OF_DAY
    for block in busy:
        if block.start - start >= duration:
            available.append(TimeRange(start, block.start))
        start = max(start, block.end)

    if END_OF_DAY - start >= duration:
        available.append(TimeRange(start, END_OF_DAY))

    return available


def find_available_gaps(events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
    """Free gaps that satisfy every mandatory attendee, ignoring optional ones."""
    gaps = free_gaps(merge_busy_ranges(events, request), request.duration)
    logger.debug(f"Found {len(gaps)} gaps of at least {request.duration} minutes: "
                 f"{', '.join(str(g) for g in gaps) or 'none'}")
    return gaps
