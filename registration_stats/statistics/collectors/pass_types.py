"""
Pass type statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Optional, Sequence, Tuple

from registration_stats.record import ParticipantRecord, text_value
from registration_stats.statistics.base import StatisticsCollector, register_collector
from registration_stats.statistics.config import DEFAULT_PASS_TYPES
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class PassTypesCollector(StatisticsCollector):
    """
    Collects pass type statistics from the snapshot.

    Statistics collected:
        - Count per known pass type (every known label present, zero included)
        - Records whose pass type is not a known label
        - Dominant pass type
    """
    collector_id: str = "pass_types"
    known_pass_types: Tuple[str, ...] = DEFAULT_PASS_TYPES

    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect pass type statistics."""
        stats = Stats()

        counts: Dict[str, int] = {label: 0 for label in self.known_pass_types}
        unrecognised = 0

        for record in records:
            pass_type = text_value(record.pass_type)
            if pass_type is not None and pass_type in counts:
                counts[pass_type] += 1
            else:
                unrecognised += 1

        stats.add_value('pass_types', 'counts', counts)
        stats.add_value('pass_types', 'unrecognised', unrecognised)
        stats.add_value('pass_types', 'dominant', self._dominant(counts))

        logger.info(f"Pass types: {counts}, {unrecognised} unrecognised")
        return stats

    def _dominant(self, counts: Dict[str, int]) -> Optional[str]:
        """
        Label with the highest count.

        Labels are scanned in configured order and a later label only takes
        over on a strictly greater count, so the earliest label wins ties.
        """
        best: Optional[str] = None
        best_count = -1
        for label in self.known_pass_types:
            if counts[label] > best_count:
                best = label
                best_count = counts[label]
        return best
