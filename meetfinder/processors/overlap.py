# File: meetfinder/processors/overlap.py

from enum import Enum
from typing import Optional

from meetfinder.models import TimeRange


class OverlapCase(Enum):
    """How a stretch of optional-attendee unavailability sits against a free gap."""
    COVERS = "covers"                  # spans the whole gap
    OVERLAPS_BEFORE = "overlaps_before"  # starts at/before the gap, ends inside it
    CONTAINED = "contained"            # starts inside the gap, ends at/before its end
    STARTS_DURING = "starts_during"    # starts inside the gap, ends after it


def classify_overlap(unavailable: TimeRange, gap: TimeRange) -> Optional[OverlapCase]:
    """
    Classify an overlapping pair into exactly one case.

    Returns None when the two ranges share no minute.
    """
    if not unavailable.overlaps(gap):
        return None
    if unavailable.starts_on_or_before_ends_on_or_after(gap):
        return OverlapCase.COVERS
    if unavailable.overlaps_before(gap):
        return OverlapCase.OVERLAPS_BEFORE
    if gap.contains(unavailable):
        return OverlapCase.CONTAINED
    if unavailable.starts_during_ends_on_or_after(gap):
        return OverlapCase.STARTS_DURING
    raise ValueError(f"Unclassified overlap between {unavailable} and {gap}")
