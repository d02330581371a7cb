# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests all dataclasses, their predicates and factories.
"""

import dataclasses

import pytest

from meetfinder.models import (
    Event, EventTimePoint, IntervalUnavailability, MeetingRequest, TimeRange, WHOLE_DAY,
    CalendarFormatError, InvalidRangeError, InvalidRequestError, MeetingFinderError,
    event_from_dict, meeting_request_from_dict, parse_minutes, format_minutes, by_start, by_time,
)


# ==================== TimeRange Tests ====================

class TestTimeRange:
    """Tests for TimeRange construction and predicates."""

    def test_whole_day(self):
        """Test the whole-day sentinel."""
        assert WHOLE_DAY == TimeRange(0, 1440)
        assert WHOLE_DAY.duration() == 1440

    def test_constructors(self):
        """Test the alternative constructors."""
        assert TimeRange.from_start_duration(60, 30) == TimeRange(60, 90)
        assert TimeRange.from_start_end(60, 90) == TimeRange(60, 90)
        assert TimeRange.from_start_end(0, 1439, inclusive=True) == WHOLE_DAY

    @pytest.mark.parametrize("start,end", [(10, 5), (-1, 30), (0, 1441), (1440, 1441)])
    def test_invalid_bounds_raise(self, start, end):
        """Ranges outside the day or reversed are rejected at construction."""
        with pytest.raises(InvalidRangeError):
            TimeRange(start, end)

    def test_non_integer_bounds_raise(self):
        """Test non-integer bounds are rejected."""
        with pytest.raises(InvalidRangeError, match="must be an int"):
            TimeRange(1.5, 30)

    def test_invalid_range_is_value_error(self):
        """Test range errors are ValueErrors."""
        with pytest.raises(ValueError):
            TimeRange(30, 10)

    def test_is_immutable(self):
        """Test ranges cannot be modified."""
        time_range = TimeRange(0, 30)
        with pytest.raises(dataclasses.FrozenInstanceError):
            time_range.start = 10

    def test_overlaps(self):
        """Test overlap detection."""
        assert TimeRange(0, 60).overlaps(TimeRange(30, 90))
        assert TimeRange(30, 90).overlaps(TimeRange(0, 60))
        assert TimeRange(0, 120).overlaps(TimeRange(30, 60))
        assert not TimeRange(0, 60).overlaps(TimeRange(60, 90))
        assert not TimeRange(60, 90).overlaps(TimeRange(0, 60))

    def test_contains(self):
        """Test range containment."""
        assert TimeRange(0, 120).contains(TimeRange(30, 60))
        assert TimeRange(0, 120).contains(TimeRange(0, 120))
        assert not TimeRange(30, 60).contains(TimeRange(0, 120))
        assert not TimeRange(0, 60).contains(TimeRange(30, 90))

    def test_contains_point(self):
        """Test minute containment."""
        assert TimeRange(0, 60).contains_point(0)
        assert not TimeRange(0, 60).contains_point(60)

    def test_overlaps_before(self):
        """Test starting before and ending inside."""
        gap = TimeRange(100, 200)
        assert TimeRange(50, 150).overlaps_before(gap)
        assert TimeRange(100, 150).overlaps_before(gap)
        assert not TimeRange(50, 200).overlaps_before(gap)
        assert not TimeRange(50, 100).overlaps_before(gap)
        assert not TimeRange(120, 150).overlaps_before(gap)

    def test_starts_on_or_before_ends_on_or_after(self):
        """Test full coverage."""
        gap = TimeRange(100, 200)
        assert TimeRange(100, 200).starts_on_or_before_ends_on_or_after(gap)
        assert TimeRange(0, 300).starts_on_or_before_ends_on_or_after(gap)
        assert not TimeRange(101, 300).starts_on_or_before_ends_on_or_after(gap)
        assert not TimeRange(0, 199).starts_on_or_before_ends_on_or_after(gap)

    def test_starts_during_ends_on_or_after(self):
        """Test starting inside and ending at or after."""
        gap = TimeRange(100, 200)
        assert TimeRange(150, 200).starts_during_ends_on_or_after(gap)
        assert TimeRange(150, 300).starts_during_ends_on_or_after(gap)
        assert not TimeRange(100, 300).starts_during_ends_on_or_after(gap)
        assert not TimeRange(200, 300).starts_during_ends_on_or_after(gap)
        assert not TimeRange(150, 180).starts_during_ends_on_or_after(gap)

    def test_str_and_to_dict(self):
        """Test formatting."""
        time_range = TimeRange(510, 1440)
        assert str(time_range) == "08:30-24:00"
        assert time_range.to_dict() == {
            'start': 510, 'end': 1440, 'duration': 930, 'label': "08:30-24:00"
        }


# ==================== Event Tests ====================

class TestEvent:
    """Tests for Event dataclass."""

    def test_attendees_are_frozen(self):
        """Test attendees become a frozenset."""
        event = Event("Sync", TimeRange(0, 30), ["A", "B", "A"])
        assert event.attendees == frozenset({"A", "B"})
        assert isinstance(event.attendees, frozenset)

    def test_with_attendees_returns_new_event(self):
        """Test deriving an event leaves the original untouched."""
        original = Event("Sync", TimeRange(0, 30), {"A", "B"})
        derived = original.with_attendees({"B"})

        assert derived.attendees == frozenset({"B"})
        assert derived.title == "Sync"
        assert derived.when == original.when
        assert original.attendees == frozenset({"A", "B"})

    def test_involves_any(self):
        """Test attendee intersection."""
        event = Event("Sync", TimeRange(0, 30), {"A"})
        assert event.involves_any({"A", "Z"})
        assert not event.involves_any({"Z"})
        assert not event.involves_any(set())

    def test_requires_time_range(self):
        """Test events need a TimeRange."""
        with pytest.raises(TypeError):
            Event("Broken", (0, 30), {"A"})

    def test_sort_by_start(self):
        """Test sorting events by start."""
        late = Event("Late", TimeRange(300, 330), set())
        early = Event("Early", TimeRange(0, 30), set())
        assert sorted([late, early], key=by_start) == [early, late]

    def test_to_dict(self):
        """Test event serialization."""
        event = Event("Sync", TimeRange(0, 30), {"B", "A"})
        assert event.to_dict() == {'title': "Sync", 'start': 0, 'end': 30, 'attendees': ["A", "B"]}


# ==================== MeetingRequest Tests ====================

class TestMeetingRequest:
    """Tests for MeetingRequest dataclass."""

    def test_creation(self):
        """Test basic request creation."""
        request = MeetingRequest(["A"], {"B"}, 30)
        assert request.mandatory_attendees == frozenset({"A"})
        assert request.optional_attendees == frozenset({"B"})
        assert request.duration == 30
        assert request.has_mandatory_attendees is True

    def test_no_mandatory_attendees(self):
        """Test a request without mandatory attendees."""
        request = MeetingRequest(frozenset(), frozenset({"B"}), 30)
        assert request.has_mandatory_attendees is False

    @pytest.mark.parametrize("duration", [0, -30])
    def test_non_positive_duration_raises(self, duration):
        """Test zero and negative durations are rejected."""
        with pytest.raises(InvalidRequestError, match="must be positive"):
            MeetingRequest(frozenset(), frozenset(), duration)

    def test_non_integer_duration_raises(self):
        """Test fractional durations are rejected."""
        with pytest.raises(InvalidRequestError):
            MeetingRequest(frozenset(), frozenset(), "30")

    def test_string_attendees_rejected(self):
        """Test a bare string is not an attendee collection."""
        with pytest.raises(InvalidRequestError):
            MeetingRequest("Alice", frozenset(), 30)

    def test_errors_share_base_class(self):
        """Test the error hierarchy."""
        assert issubclass(InvalidRequestError, MeetingFinderError)
        assert issubclass(InvalidRangeError, MeetingFinderError)
        assert issubclass(CalendarFormatError, MeetingFinderError)


# ==================== Sweep Value Tests ====================

class TestSweepValues:
    """Tests for EventTimePoint and IntervalUnavailability."""

    def test_time_point_time(self):
        """Test the time of start and end points."""
        event = Event("Sync", TimeRange(60, 90), {"A"})
        assert EventTimePoint(event, True).time == 60
        assert EventTimePoint(event, False).time == 90

    def test_time_point_sort_is_stable(self):
        """Test points at the same minute keep their order."""
        first = Event("First", TimeRange(0, 60), {"A"})
        second = Event("Second", TimeRange(60, 90), {"B"})
        points = [
            EventTimePoint(first, True), EventTimePoint(first, False),
            EventTimePoint(second, True), EventTimePoint(second, False),
        ]
        ordered = sorted(points, key=by_time)
        assert ordered == points

    def test_unavailability_str(self):
        """Test unavailability formatting."""
        item = IntervalUnavailability(TimeRange(0, 60), 2)
        assert str(item) == "00:00-01:00: 2"


# ==================== Factory Tests ====================

class TestFactories:
    """Tests for dictionary factories and time parsing."""

    @pytest.mark.parametrize("raw,expected", [
        (0, 0), (90, 90), ("90", 90), ("08:30", 510), ("8:30", 510), ("24:00", 1440),
    ])
    def test_parse_minutes(self, raw, expected):
        """Test parsing times of day."""
        assert parse_minutes(raw) == expected

    @pytest.mark.parametrize("raw", ["noon", "08:75", None, True, 1.5])
    def test_parse_minutes_rejects(self, raw):
        """Test unreadable times are rejected."""
        with pytest.raises(ValueError):
            parse_minutes(raw)

    def test_format_minutes(self):
        """Test formatting minutes as HH:MM."""
        assert format_minutes(0) == "00:00"
        assert format_minutes(615) == "10:15"

    def test_event_from_dict(self):
        """Test building an event from a record."""
        event = event_from_dict({'title': 'Lunch', 'start': '12:00', 'end': '13:00', 'attendees': ['A']})
        assert event.title == 'Lunch'
        assert event.when == TimeRange(720, 780)
        assert event.attendees == frozenset({'A'})

    def test_event_from_dict_with_duration(self):
        """Test an event record with a duration instead of an end."""
        event = event_from_dict({'title': 'Lunch', 'start': 720, 'duration': 45})
        assert event.when == TimeRange(720, 765)
        assert event.attendees == frozenset()

    def test_event_from_dict_missing_start(self):
        """Test an event record without a start."""
        with pytest.raises(CalendarFormatError, match="missing field"):
            event_from_dict({'title': 'Lunch', 'end': '13:00'})

    def test_event_from_dict_bad_time(self):
        """Test an event record with an unreadable time."""
        with pytest.raises(CalendarFormatError, match="unreadable time"):
            event_from_dict({'title': 'Lunch', 'start': 'noon', 'end': '13:00'})

    def test_event_from_dict_reversed_range(self):
        """Test an event record ending before it starts."""
        with pytest.raises(InvalidRangeError):
            event_from_dict({'title': 'Lunch', 'start': '13:00', 'end': '12:00'})

    def test_event_from_dict_attendees_must_be_list(self):
        """Test attendees given as a string."""
        with pytest.raises(CalendarFormatError):
            event_from_dict({'title': 'Lunch', 'start': 0, 'end': 30, 'attendees': 'A'})

    def test_meeting_request_from_dict(self):
        """Test building a request from a record."""
        request = meeting_request_from_dict({
            'attendees': ['A', 'B'],
            'optional_attendees': ['C'],
            'duration': '45',
        })
        assert request.mandatory_attendees == frozenset({'A', 'B'})
        assert request.optional_attendees == frozenset({'C'})
        assert request.duration == 45

    def test_meeting_request_from_dict_defaults(self):
        """Test a request record with only a duration."""
        request = meeting_request_from_dict({'duration': 30})
        assert request.mandatory_attendees == frozenset()
        assert request.optional_attendees == frozenset()

    def test_meeting_request_from_dict_missing_duration(self):
        """Test a request record without a duration."""
        with pytest.raises(CalendarFormatError, match="duration"):
            meeting_request_from_dict({'attendees': ['A']})

    def test_meeting_request_from_dict_zero_duration(self):
        """Test a request record with a zero duration."""
        with pytest.raises(InvalidRequestError):
            meeting_request_from_dict({'duration': 0})
