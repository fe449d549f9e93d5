"""
Pipeline for running statistics collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from registration_stats.record import ParticipantRecord
from registration_stats.statistics.base import StatisticsCollector, get_collector_registry
from registration_stats.statistics.config import CORE_COLLECTOR_IDS, AggregationConfig
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)


def collector_kwargs(collector_cls: Type[StatisticsCollector], config: AggregationConfig) -> Dict[str, Any]:
    """
    Options from config that collector_cls declares as dataclass fields.

    Args:
        collector_cls: Collector class to instantiate
        config: Aggregation configuration

    Returns:
        Dict of constructor keyword arguments
    """
    accepted = {f.name for f in fields(collector_cls)}
    return {name: value for name, value in config.collector_options().items() if name in accepted}


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running statistics collectors on a snapshot of records.

    Attributes:
        collectors: List of collector instances to run
        config: Configuration for the pipeline
        app_hooks: Optional application hooks for progress reporting
    """
    collectors: List[StatisticsCollector] = field(default_factory=list)
    config: AggregationConfig = field(default_factory=AggregationConfig)
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """
        Initialize collectors from registry if none provided.

        If no collectors are explicitly provided, automatically loads
        all registered collectors from the global registry.
        """
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Load all registered collectors with configuration applied.

        Instantiates each collector from the registry with the options it
        declares and applies the enabled/disabled setting from configuration.
        """
        registry = get_collector_registry()
        for collector_id, collector_cls in registry.items():
            enabled = self.config.is_enabled(collector_id)
            kwargs = collector_kwargs(collector_cls, self.config)
            collector = collector_cls(enabled=enabled, app_hooks=self.app_hooks, **kwargs)
            self.collectors.append(collector)
            logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")

    def run(self, records: Iterable[Any]) -> Stats:
        """
        Run all enabled collectors on the snapshot.

        Args:
            records: Iterable of ParticipantRecord objects or raw record mappings

        Returns:
            Stats object with all collected values
        """
        stats = Stats()

        # Materialise once; every collector reads the same snapshot
        record_list = [ParticipantRecord.coerce(record) for record in records]

        logger.debug(f"Running statistics on {len(record_list)} records")

        enabled_collectors = [c for c in self.collectors if c.enabled]
        total_collectors = len(enabled_collectors)
        self._report_step(info="Collecting statistics", target=total_collectors, reset_counter=True, plus_step=0)

        for collector_num, collector in enumerate(enabled_collectors, start=1):
            try:
                logger.debug(f"Running collector: {collector.collector_id}")
                collector_stats = collector.collect(record_list, stats, collector_num, total_collectors)
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)
                # Summary fields must never be silently zeroed
                if collector.collector_id in CORE_COLLECTOR_IDS:
                    raise
                collector_stats = self._fallback_stats(collector)
            stats.merge(collector_stats)

            # Report progress after each collector
            self._report_step(plus_step=1)

        for collector in self.collectors:
            if not collector.enabled:
                logger.debug(f"Skipped disabled collector: {collector.collector_id}")

        return stats

    def _fallback_stats(self, collector: StatisticsCollector) -> Stats:
        """Empty-snapshot values for a collector that failed."""
        try:
            return collector.empty_stats()
        except Exception as e:
            logger.error(f"Collector {collector.collector_id} failed on empty snapshot: {e}")
            return Stats()

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)
