"""
Statistics module for event registration data.

This module computes display-ready summary statistics (counts, distributions,
top-N rankings) from a snapshot of participant registration records.

Main components:
    - StatisticsCollector: Base class for creating custom statistics collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - compute: Records + configuration in, Summary out
    - Built-in collectors: totals, payments, pass types, attendance, colleges
"""

from registration_stats.statistics.base import StatisticsCollector, register_collector, get_collector_registry
from registration_stats.statistics.config import AggregationConfig
from registration_stats.statistics.pipeline import StatisticsPipeline
from registration_stats.statistics.model import Stats, StatValue, Summary
from registration_stats.statistics.aggregator import compute
from registration_stats.statistics.statistics import Statistics

# Import collectors to ensure they're registered
from registration_stats.statistics import collectors

__all__ = [
    'StatisticsCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'AggregationConfig',
    'Statistics',
    'Stats',
    'StatValue',
    'Summary',
    'compute',
    'collectors',
]
