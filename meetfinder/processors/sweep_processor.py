# File: meetfinder/processors/sweep_processor.py
"""
Optional-attendee sweep.

Turns the events that only concern optional attendees into a list of
IntervalUnavailability values: maximal stretches, long enough for the
meeting, over which the number of busy optional attendees is constant.
"""

from collections import Counter
from typing import FrozenSet, Iterable, List, Optional

from meetfinder.models import (
    Event, EventTimePoint, IntervalUnavailability, MeetingRequest, TimeRange,
    START_OF_DAY, END_OF_DAY, by_start, by_time,
)
from meetfinder.utils.logger import LoggerMixin


class SweepProcessor(LoggerMixin):
    """Sweeps optional-only events for one meeting request."""

    def __init__(self, request: MeetingRequest):
        self.request = request

    def optional_only_events(
        self,
        events: Iterable[Event],
        within: Optional[TimeRange] = None
    ) -> List[Event]:
        """
        Select events that block no mandatory attendee but at least one optional one.

        Each selected event is copied down to its optional attendees.
        Zero-length events are skipped.

        Args:
            events: All events of the day
            within: If given, keep only events overlapping this range

        Returns:
            Derived events sorted by start
        """
        mandatory = self.request.mandatory_attendees
        optional = self.request.optional_attendees

        relevant: List[Event] = []
        for event in sorted(events, key=by_start):
            if event.involves_any(mandatory) or not event.involves_any(optional):
                continue
            # Zero-length events block no minute
            if event.when.duration() == 0:
                continue
            if within is not None and not event.when.overlaps(within):
                continue
            relevant.append(event.with_attendees(event.attendees & optional))

        self.logger.debug(f"{len(relevant)} events concern optional attendees only")
        return relevant

    def sweep(self, events: List[Event], whole_day: bool = True) -> List[IntervalUnavailability]:
        """
        Run the sweep line over optional-only events.

        A stretch only ends where the set of busy optional attendees changes,
        so boundaries that leave it unchanged (a second event for someone
        already busy) never split a stretch.

        Args:
            events: Events already reduced to optional attendees
            whole_day: Also emit zero-count stretches before the first and
                after the last boundary

        Returns:
            Disjoint unavailability intervals in time order
        """
        points = [EventTimePoint(event, is_start) for event in events for is_start in (True, False)]
        points.sort(key=by_time)

        if not points and not whole_day:
            return []

        # Attendee -> number of their events currently open
        busy: Counter = Counter()
        current: FrozenSet[str] = frozenset()
        stretch_start = START_OF_DAY if whole_day else points[0].time
        result: List[IntervalUnavailability] = []

        for index, point in enumerate(points):
            self._apply(busy, point)
            # Settle every boundary at this minute before comparing
            if index + 1 < len(points) and points[index + 1].time == point.time:
                continue
            now_busy = frozenset(busy)
            if now_busy == current:
                continue
            self._close(result, stretch_start, point.time, len(current))
            stretch_start, current = point.time, now_busy

        if whole_day:
            self._close(result, stretch_start, END_OF_DAY, len(current))

        self.logger.debug(
            f"Sweep over {len(points)} boundaries produced {len(result)} intervals: "
            f"{', '.join(str(item) for item in result) or 'none'}"
        )
        return result

    def _close(self, result: List[IntervalUnavailability], start: int, end: int, count: int) -> None:
        if end - start >= self.request.duration:
            result.append(IntervalUnavailability(TimeRange(start, end), count))

    @staticmethod
    def _apply(busy: Counter, point: EventTimePoint) -> None:
        for attendee in point.event.attendees:
            if point.is_start:
                busy[attendee] += 1
            else:
                busy[attendee] -= 1
                if busy[attendee] <= 0:
                    del busy[attendee]
