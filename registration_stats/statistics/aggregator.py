"""
Entry point for turning a snapshot of registration records into a Summary.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from registration_stats.statistics.config import AggregationConfig
from registration_stats.statistics.model import Summary
from registration_stats.statistics.pipeline import StatisticsPipeline

logger = logging.getLogger(__name__)


def compute(records: Iterable[Any], config: Optional[AggregationConfig] = None, app_hooks: Optional[Any] = None) -> Summary:
    """
    Compute summary statistics for a snapshot of registration records.

    Malformed, missing or unrecognised field values never raise; they simply
    do not match any counted category. The same records (in the same order)
    always give an equal Summary.

    Args:
        records: ParticipantRecord objects or raw record mappings
        config: Aggregation configuration (defaults when omitted)
        app_hooks: Optional application hooks for progress reporting

    Returns:
        Summary: A fresh, immutable summary value
    """
    if config is None:
        config = AggregationConfig()

    pipeline = StatisticsPipeline(config=config, app_hooks=app_hooks)
    stats = pipeline.run(records)
    summary = Summary.from_stats(stats, config)

    logger.debug(f"Computed summary for {summary.total_records} records")
    return summary
