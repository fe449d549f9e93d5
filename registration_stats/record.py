"""
record.py - participant registration records for event statistics.

This module provides the ParticipantRecord class and helpers for turning raw
registration documents (as delivered by a record source) into records the
statistics collectors can read. It supports:
    - camelCase documents (paymentStatus, passType, ...) and snake_case ones
    - attendance flags given as a nested mapping or as top-level keys
    - tolerant coercion: unknown shapes become empty records, never errors

Module: registration_stats.record
"""

__all__ = ['ParticipantRecord', 'text_value']

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Raw document key -> ParticipantRecord attribute
FIELD_ALIASES: Dict[str, str] = {
    'paymentStatus': 'payment_status',
    'payment_status': 'payment_status',
    'passType': 'pass_type',
    'pass_type': 'pass_type',
    'concertPaymentStatus': 'concert_payment_status',
    'concert_payment_status': 'concert_payment_status',
    'college': 'college',
}

ATTENDANCE_KEYS = ('eventAttendanceFlags', 'event_attendance', 'events')


def text_value(value: Any) -> Optional[str]:
    """
    Return value if it is a non-empty string, otherwise None.

    Used by collectors so that wrong types and empty strings are treated as
    "no value" rather than raising.
    """
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class ParticipantRecord:
    """
    Represents one registration entry.

    Attributes:
        payment_status (Any): Registration payment status, e.g. 'Successful'.
        pass_type (Any): Pass label, e.g. 'General', 'Hackathon', 'Signature'.
        concert_payment_status (Any): Concert payment status, independent of payment_status.
        college (Any): Free-text college name.
        event_attendance (Mapping[str, Any]): Session slot name -> attendance flag.
    """
    payment_status: Any = None
    pass_type: Any = None
    concert_payment_status: Any = None
    college: Any = None
    event_attendance: Mapping[str, Any] = field(default_factory=dict)

    def attended(self, slot: str) -> bool:
        """True if the flag for slot is present and truthy."""
        try:
            return bool(self.event_attendance.get(slot))
        except (AttributeError, TypeError, ValueError):
            return False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ParticipantRecord':
        """
        Create a record from a raw registration document.

        Known keys are mapped through FIELD_ALIASES. Attendance flags are taken
        from a nested mapping under one of ATTENDANCE_KEYS if present; every
        other top-level key is kept as a flag as well, so flat documents such
        as {'event1': True, 'event2': False} work without extra mapping.

        Args:
            data: Mapping of field name to value.

        Returns:
            ParticipantRecord: The coerced record.
        """
        values: Dict[str, Any] = {}
        attendance: Dict[str, Any] = {}
        nested_attendance: Dict[str, Any] = {}

        for key, value in data.items():
            if key in FIELD_ALIASES:
                values[FIELD_ALIASES[key]] = value
            elif key in ATTENDANCE_KEYS:
                if isinstance(value, Mapping):
                    nested_attendance.update(value)
            elif isinstance(key, str):
                attendance[key] = value

        # Nested flags win over same-named top-level keys
        attendance.update(nested_attendance)
        return cls(event_attendance=attendance, **values)

    @classmethod
    def coerce(cls, item: Any) -> 'ParticipantRecord':
        """
        Turn whatever a record source delivered into a ParticipantRecord.

        Accepts a ParticipantRecord (returned as is), a mapping (see from_dict)
        or any object exposing the record attributes. Anything else yields an
        empty record.
        """
        if isinstance(item, ParticipantRecord):
            return item
        if isinstance(item, Mapping):
            return cls.from_dict(item)
        if item is None:
            logger.debug("Empty registration entry treated as blank record")
            return cls()

        attendance = getattr(item, 'event_attendance', None)
        if attendance is None:
            attendance = getattr(item, 'eventAttendanceFlags', None)
        return cls(
            payment_status=getattr(item, 'payment_status', getattr(item, 'paymentStatus', None)),
            pass_type=getattr(item, 'pass_type', getattr(item, 'passType', None)),
            concert_payment_status=getattr(item, 'concert_payment_status',
                                           getattr(item, 'concertPaymentStatus', None)),
            college=getattr(item, 'college', None),
            event_attendance=dict(attendance) if isinstance(attendance, Mapping) else {},
        )
