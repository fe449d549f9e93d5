"""
Payment statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Optional, Sequence

from registration_stats.record import ParticipantRecord
from registration_stats.statistics.base import StatisticsCollector, register_collector
from registration_stats.statistics.config import SUCCESS_STATUS
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class PaymentsCollector(StatisticsCollector):
    """
    Collects payment statistics from the snapshot.

    Statistics collected:
        - Records with a successful registration payment
        - Records with a successful concert payment

    A status counts only when it equals success_status exactly; no case or
    whitespace normalisation is applied.
    """
    collector_id: str = "payments"
    success_status: str = SUCCESS_STATUS

    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect payment statistics."""
        stats = Stats()

        successful = 0
        successful_concert = 0

        for record in records:
            if self._is_successful(record.payment_status):
                successful += 1
            if self._is_successful(record.concert_payment_status):
                successful_concert += 1

        stats.add_value('payments', 'successful_payments', successful)
        stats.add_value('payments', 'successful_concert_payments', successful_concert)

        logger.info(f"Payments: {successful} successful, {successful_concert} successful concert")
        return stats

    def _is_successful(self, status: Any) -> bool:
        return isinstance(status, str) and status == self.success_status
