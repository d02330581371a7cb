# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and calendar documents for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from meetfinder.models import Event, TimeRange


PERSON_A = "Person A"
PERSON_B = "Person B"
PERSON_C = "Person C"


# ==================== Event Fixtures ====================

@pytest.fixture
def morning_event_a():
    """Person A busy 08:00-08:30."""
    return Event("Event 1", TimeRange(480, 510), {PERSON_A})


@pytest.fixture
def morning_event_b():
    """Person B busy 09:00-10:00."""
    return Event("Event 2", TimeRange(540, 600), {PERSON_B})


@pytest.fixture
def all_day_event_c():
    """Person C busy the whole day."""
    return Event("Event 3", TimeRange(0, 1440), {PERSON_C})


# ==================== Calendar Document Fixtures ====================

@pytest.fixture
def sample_calendar_document():
    """Calendar document as stored on disk."""
    return {
        'events': [
            {'title': 'Standup', 'start': '08:00', 'end': '08:30', 'attendees': [PERSON_A]},
            {'title': 'Review', 'start': 540, 'end': 600, 'attendees': [PERSON_B]},
            {'title': 'Offsite', 'start': '00:00', 'end': '24:00', 'attendees': [PERSON_C]},
        ],
        'request': {
            'attendees': [PERSON_A, PERSON_B],
            'optional_attendees': [PERSON_C],
            'duration': 30,
        },
    }
