"""
Registration totals collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence

from registration_stats.record import ParticipantRecord
from registration_stats.statistics.base import StatisticsCollector, register_collector
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class TotalsCollector(StatisticsCollector):
    """
    Counts registration records.

    Statistics collected:
        - Total number of records in the snapshot
    """
    collector_id: str = "totals"

    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect record totals."""
        stats = Stats()
        total = len(records)
        stats.add_value('registrations', 'total_records', total)

        logger.info(f"Registrations: {total} records")
        return stats
