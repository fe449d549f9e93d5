"""
Base classes for statistics collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Optional, Sequence, Type

from registration_stats.record import ParticipantRecord
from registration_stats.statistics.model import Stats

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['StatisticsCollector']] = {}


def register_collector(cls: Type['StatisticsCollector']) -> Type['StatisticsCollector']:
    """
    Decorator to register a collector class in the global registry.

    Collectors run in registration order.

    Usage:
        @register_collector
        @dataclass
        class MyCollector(StatisticsCollector):
            collector_id: str = "my_collector"
            ...
    """
    collector_id = getattr(cls, 'collector_id', None)
    if collector_id:
        _COLLECTOR_REGISTRY[collector_id] = cls
        logger.debug(f"Registered statistics collector: {collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} missing 'collector_id' attribute, not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['StatisticsCollector']]:
    """Get the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class StatisticsCollector(ABC):
    """
    Base class for statistics collectors.

    Collectors read a snapshot of registration records and produce aggregate
    statistics. They never modify the records.

    Attributes:
        collector_id: Unique identifier for this collector
        enabled: Whether this collector is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    collector_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    @abstractmethod
    def collect(self, records: Sequence[ParticipantRecord], existing_stats: Stats, collector_num: Optional[int] = None, total_collectors: Optional[int] = None) -> Stats:
        """
        Collect statistics from the snapshot.

        Args:
            records: Sequence of ParticipantRecord objects
            existing_stats: Statistics collected so far by earlier collectors
            collector_num: Position of this collector in the run (for progress)
            total_collectors: Number of enabled collectors in the run

        Returns:
            Stats object with collected values
        """
        pass

    def empty_stats(self) -> Stats:
        """Values this collector reports for an empty snapshot."""
        return self.collect([], Stats())

    def __post_init__(self):
        """Validate collector configuration."""
        if not self.collector_id:
            raise ValueError(f"{self.__class__.__name__} must define collector_id")

    def _progress_prefix(self, collector_num: Optional[int], total_collectors: Optional[int]) -> str:
        if collector_num and total_collectors:
            return f"Statistics ({collector_num}/{total_collectors}): "
        return "Statistics: "

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """Report a step via app hooks if available.

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
