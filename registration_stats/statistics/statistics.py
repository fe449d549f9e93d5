from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import logging

from registration_stats.app_hooks import AppHooks
from registration_stats.record_source import InMemoryRecordSource, RecordSource
from .aggregator import compute
from .config import AggregationConfig
from .model import Summary

logger = logging.getLogger(__name__)


class Statistics:
    """
    High-level interface for computing registration statistics.

    This is a convenience wrapper around compute() that pulls snapshots from
    a record source. Nothing is recomputed behind the caller's back: call
    refresh() whenever a new snapshot should be taken.

    Example:
        # From a record source
        stats = Statistics(record_source=YamlRecordSource(Path("registrations.yaml")))
        summary = stats.refresh()

        # Standalone usage
        stats = Statistics(records=records)
        summary = stats.results
    """

    def __init__(
        self,
        record_source: Optional[RecordSource] = None,
        records: Optional[Iterable[Any]] = None,
        config: Optional[AggregationConfig] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize statistics computation.

        Args:
            record_source: Optional source to fetch snapshots from
            records: Optional records; wrapped in an in-memory source and computed immediately
            config: Ready-made configuration
            config_dict: Dictionary to configure aggregation (e.g., {'topCollegeLimit': 5})
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting
        """
        self.app_hooks = app_hooks

        if records is not None:
            record_source = InMemoryRecordSource(records)

        if record_source is None:
            logger.warning("No record source provided to Statistics")

        self.record_source = record_source

        # Create configuration
        if config is not None:
            self.config = config
        elif config_dict:
            self.config = AggregationConfig.from_dict(config_dict)
        elif config_file:
            self.config = AggregationConfig(config_file=config_file)
        else:
            self.config = AggregationConfig()

        self._results: Optional[Summary] = None
        if records is not None:
            self.refresh()

    @property
    def results(self) -> Optional[Summary]:
        """Get the most recent Summary, or None before the first computation."""
        return self._results

    def refresh(self) -> Summary:
        """
        Fetch a fresh snapshot from the record source and recompute.

        Errors raised by the record source propagate unchanged.

        Returns:
            Summary for the fetched snapshot
        """
        if self.record_source is None:
            raise ValueError("Statistics has no record source to refresh from")

        records = self.record_source.fetch_records()
        logger.info(f"Computing statistics on {len(records)} records")
        return self.analyze(records)

    def analyze(self, records: Iterable[Any]) -> Summary:
        """
        Compute statistics for the given records.

        Args:
            records: ParticipantRecord objects or raw record mappings

        Returns:
            Summary for the records
        """
        self._results = compute(records, self.config, app_hooks=self.app_hooks)
        return self._results

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the latest Summary as a dictionary.

        Returns:
            Presentation dictionary, empty before the first computation
        """
        if self._results:
            return self._results.to_dict()
        return {}
