# File: meetfinder/models/errors.py
"""
Exception types raised at model construction and data-loading boundaries.
"""


class MeetingFinderError(ValueError):
    """Base class for all meeting finder validation errors."""


class InvalidRangeError(MeetingFinderError):
    """A TimeRange with start > end or bounds outside the day."""


class InvalidRequestError(MeetingFinderError):
    """A MeetingRequest with a non-positive duration."""


class CalendarFormatError(MeetingFinderError):
    """A calendar document that cannot be turned into events or a request."""
