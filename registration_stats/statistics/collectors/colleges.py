"""
College statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import List, Optional, Sequence, Tuple

from registration_stats.record import ParticipantRecord, text_value
from registration_stats.statistics.base import StatisticsCollector, register_collector
from registration_stats.statistics.config import DEFAULT_TOP_COLLEGE_LIMIT
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class CollegesCollector(StatisticsCollector):
    """
    Collects college statistics from the snapshot.

    Statistics collected:
        - Top colleges by registration count
        - Number of distinct colleges

    Empty or missing college names are left out of both values. Names are
    compared exactly as given.
    """
    collector_id: str = "colleges"
    top_college_limit: int = DEFAULT_TOP_COLLEGE_LIMIT

    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """Collect college statistics."""
        stats = Stats()

        prefix = self._progress_prefix(collector_num, total_collectors)
        self._report_step(info=f"{prefix}Analyzing colleges", target=len(records), reset_counter=True, plus_step=0)

        # Counter keeps first-seen insertion order
        college_counts = Counter()
        for record in records:
            college = text_value(record.college)
            if college is not None:
                college_counts[college] += 1

        stats.add_value('colleges', 'distribution', self._top(college_counts))
        stats.add_value('colleges', 'distinct_count', len(college_counts))

        logger.info(f"Colleges: {sum(college_counts.values())} registrations across {len(college_counts)} colleges")
        return stats

    def _top(self, college_counts: Counter) -> List[Tuple[str, int]]:
        """
        Top entries by count.

        sorted() is stable, so equal counts keep first-seen order.
        """
        ranked = sorted(college_counts.items(), key=lambda item: item[1], reverse=True)
        return ranked[:self.top_college_limit]
