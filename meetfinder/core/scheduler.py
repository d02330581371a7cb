# File: meetfinder/core/scheduler.py
"""
Meeting window query engine.

Pipeline:
    1. Merge the busy time of mandatory attendees
    2. Extract the free gaps long enough for the meeting
    3. Sweep optional-only events into unavailability intervals
    4. Intersect the intervals with each gap, keeping the least busy windows
    5. Apply the fallback rules for cases where optimizing gives nothing
"""

from typing import Iterable, List, Optional, Sequence

from meetfinder.models import Event, IntervalUnavailability, MeetingRequest, TimeRange
from meetfinder.processors.interval_processor import find_available_gaps
from meetfinder.processors.overlap import OverlapCase, classify_overlap
from meetfinder.processors.sweep_processor import SweepProcessor
from meetfinder.utils.logger import setup_logger

logger = setup_logger(__name__)


class CandidateCollector:
    """Keeps the windows sharing the smallest unavailable count seen so far."""

    def __init__(self, duration: int):
        self.duration = duration
        self.best: Optional[int] = None
        self.windows: List[TimeRange] = []

    def offer(self, window: TimeRange, unavailable_count: int) -> None:
        if window.duration() < self.duration:
            return
        if self.best is None or unavailable_count < self.best:
            self.best = unavailable_count
            self.windows = [window]
        elif unavailable_count == self.best:
            self.windows.append(window)


class MeetingScheduler:
    """Finds the windows of a day where a requested meeting fits best."""

    def query(self, events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
        """
        Compute the best windows for the meeting.

        Args:
            events: The day's events, in any order
            request: Who must attend, who may attend, and for how long

        Returns:
            Windows in start order; empty when the meeting cannot be placed
        """
        events = list(events)
        logger.info(
            f"Querying {len(events)} events for a {request.duration}-minute meeting "
            f"({len(request.mandatory_attendees)} mandatory, "
            f"{len(request.optional_attendees)} optional)"
        )

        gaps = find_available_gaps(events, request)
        if not gaps:
            logger.info("No window satisfies the mandatory attendees")
            return []

        sweeper = SweepProcessor(request)
        optional_events = sweeper.optional_only_events(events)
        if not optional_events:
            logger.info(f"No optional-only conflicts; returning {len(gaps)} gaps")
            return gaps

        unavailability = sweeper.sweep(optional_events)
        collector = self._collect_candidates(gaps, unavailability, request.duration)

        if collector.best is None:
            if request.has_mandatory_attendees:
                logger.info("No window fits around optional attendees; falling back to mandatory gaps")
                return gaps
            logger.info("No window fits around optional attendees")
            return []

        optional_count = len(request.optional_attendees)
        if (not request.has_mandatory_attendees
                and optional_count == 2
                and collector.best >= 1):
            logger.info(
                f"Only optional attendees and at best {collector.best} of 2 busy; no meeting proposed"
            )
            return []

        if collector.best == optional_count:
            logger.info("Every window has all optional attendees busy; returning mandatory gaps")
            return gaps

        logger.info(
            f"Found {len(collector.windows)} windows with {collector.best} "
            f"optional attendee(s) unavailable"
        )
        return collector.windows

    def _collect_candidates(
        self,
        gaps: Sequence[TimeRange],
        unavailability: Sequence[IntervalUnavailability],
        duration: int
    ) -> CandidateCollector:
        """Intersect each gap with the unavailability intervals using a shared cursor."""
        collector = CandidateCollector(duration)
        cursor = 0

        for gap in gaps:
            while cursor < len(unavailability):
                item = unavailability[cursor]
                span = item.range

                if span.end <= gap.start:
                    cursor += 1
                    continue
                if span.start >= gap.end:
                    break

                case = classify_overlap(span, gap)
                logger.debug(f"Gap {gap} vs {item}: {case.value}")

                if case is OverlapCase.COVERS:
                    collector.offer(gap, item.unavailable_count)
                    if span.end == gap.end:
                        cursor += 1
                    break
                elif case is OverlapCase.OVERLAPS_BEFORE:
                    collector.offer(TimeRange(gap.start, span.end), item.unavailable_count)
                    cursor += 1
                elif case is OverlapCase.CONTAINED:
                    collector.offer(span, item.unavailable_count)
                    cursor += 1
                elif case is OverlapCase.STARTS_DURING:
                    collector.offer(TimeRange(span.start, gap.end), item.unavailable_count)
                    if span.end == gap.end:
                        cursor += 1
                    break

        return collector


def find_meeting_windows(events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
    """Convenience wrapper around MeetingScheduler.query."""
    return MeetingScheduler().query(events, request)
