"""registration_stats package: Summary statistics for event registration records."""

from registration_stats.record import ParticipantRecord
from registration_stats.record_source import (
    InMemoryRecordSource,
    RecordSource,
    RecordSourceError,
    YamlRecordSource,
)
from registration_stats.statistics import AggregationConfig, Statistics, Summary, compute

__all__ = [
    "AggregationConfig",
    "InMemoryRecordSource",
    "ParticipantRecord",
    "RecordSource",
    "RecordSourceError",
    "Statistics",
    "Summary",
    "YamlRecordSource",
    "compute",
]
