"""
Event attendance statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence, Tuple

from registration_stats.record import ParticipantRecord
from registration_stats.statistics.base import StatisticsCollector, register_collector
from registration_stats.statistics.config import DEFAULT_EVENT_ATTENDANCE_FIELDS
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class AttendanceCollector(StatisticsCollector):
    """
    Collects event attendance statistics from the snapshot.

    Counts attendance instances: a participant attending 3 of 5 slots
    contributes 3. Missing slots count as not attended.

    Statistics collected:
        - Total attendance instances over all configured slots
        - Attendance instances per slot
    """
    collector_id: str = "attendance"
    event_attendance_fields: Tuple[str, ...] = DEFAULT_EVENT_ATTENDANCE_FIELDS

    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect attendance statistics."""
        stats = Stats()

        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Counting attendance", target=len(records), reset_counter=True, plus_step=0)

        per_slot = {slot: 0 for slot in self.event_attendance_fields}
        for record in records:
            for slot in self.event_attendance_fields:
                if record.attended(slot):
                    per_slot[slot] += 1

        total = sum(per_slot.values())
        stats.add_value('attendance', 'total_event_attendances', total)
        stats.add_value('attendance', 'per_slot', per_slot)

        logger.info(f"Attendance: {total} instances across {len(per_slot)} slots")
        return stats
