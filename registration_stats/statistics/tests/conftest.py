"""
Pytest fixtures for statistics tests.
"""
from __future__ import annotations

import pytest
from typing import Any, Dict, Optional

from registration_stats.record import ParticipantRecord


@pytest.fixture
def make_record():
    """Create a ParticipantRecord for testing."""
    def _create_record(payment: Optional[str] = None, pass_type: Any = None,
                       concert: Optional[str] = None, college: Any = None,
                       **events: Any) -> ParticipantRecord:
        return ParticipantRecord(
            payment_status=payment,
            pass_type=pass_type,
            concert_payment_status=concert,
            college=college,
            event_attendance=dict(events),
        )

    return _create_record


@pytest.fixture
def scenario_records(make_record):
    """Three registrations: two General from X, one Hackathon from Y."""
    return [
        make_record(payment="Successful", pass_type="General", college="X"),
        make_record(payment="Failed", pass_type="General", college="X"),
        make_record(payment="Successful", pass_type="Hackathon", college="Y"),
    ]


@pytest.fixture
def raw_records() -> list[Dict[str, Any]]:
    """Raw registration documents as a record source would deliver them."""
    return [
        {"paymentStatus": "Successful", "passType": "General", "concertPaymentStatus": "Successful",
         "college": "MIT", "event1": True, "event2": True, "event3": False},
        {"paymentStatus": "Successful", "passType": "Signature", "concertPaymentStatus": "Pending",
         "college": "Stanford", "event1": True},
        {"paymentStatus": "successful", "passType": "VIP", "college": "",
         "eventAttendanceFlags": {"event4": True, "event5": True}},
        {"paymentStatus": None, "passType": "Hackathon", "college": "MIT", "event2": 1},
    ]
