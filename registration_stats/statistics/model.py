"""
Data models for statistics module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple, Union

if TYPE_CHECKING:
    from registration_stats.statistics.config import AggregationConfig


StatValue = Union[int, float, str, None, List[Any], Dict[str, Any]]


@dataclass
class Stats:
    """
    Container for statistical results collected from a dataset.

    Statistics are organized into categories (e.g., 'payments', 'colleges')
    with named values within each category. Collectors fill a Stats each and
    the pipeline merges them; the final value handed to callers is a Summary.
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        """Add a statistical value to a category."""
        if category not in self.categories:
            self.categories[category] = {}
        self.categories[category][name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        """Get a statistical value from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        """Get all values in a category."""
        return self.categories.get(category, {})

    def merge(self, other: Stats) -> None:
        """Merge another Stats object into this one."""
        for category, values in other.categories.items():
            if category not in self.categories:
                self.categories[category] = {}
            self.categories[category].update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        """Convert to a plain dictionary."""
        return {category: dict(values) for category, values in self.categories.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, StatValue]]) -> Stats:
        """Create from a plain dictionary."""
        return cls(categories={category: dict(values) for category, values in data.items()})


def _percentage(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(100 * part / total, 1)


@dataclass(frozen=True)
class Summary:
    """
    Display-ready statistics for one snapshot of registration records.

    A Summary is a value: it is built once from collected Stats and replaced
    wholesale on the next computation. Mapping and sequence fields are
    read-only views that share nothing with the input records.

    Attributes:
        total_records: Number of input records.
        successful_payments: Records whose payment status is exactly 'Successful'.
        pass_type_counts: Known pass-type label -> count, every label present.
        successful_concert_payments: Records whose concert payment status is exactly 'Successful'.
        total_event_attendances: Truthy attendance flags over all records and configured slots.
        college_distribution: Top (college, count) pairs, count descending, first-seen on ties.
        distinct_college_count: Distinct non-empty college names in the whole snapshot.
        dominant_pass_type: Known label with the highest count, first configured label on ties.
    """
    total_records: int = 0
    successful_payments: int = 0
    pass_type_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    successful_concert_payments: int = 0
    total_event_attendances: int = 0
    college_distribution: Tuple[Tuple[str, int], ...] = ()
    distinct_college_count: int = 0
    dominant_pass_type: Optional[str] = None

    # Compared by value but not hashable: pass_type_counts is a mapping
    __hash__ = None

    def __post_init__(self) -> None:
        # Freeze containers so the value cannot be changed through them
        object.__setattr__(self, 'pass_type_counts', MappingProxyType(dict(self.pass_type_counts)))
        object.__setattr__(
            self, 'college_distribution',
            tuple((name, count) for name, count in self.college_distribution),
        )

    @property
    def payment_success_rate(self) -> float:
        """Percentage of records with a successful payment (0.0 when empty)."""
        return _percentage(self.successful_payments, self.total_records)

    @property
    def concert_payment_success_rate(self) -> float:
        """Percentage of records with a successful concert payment (0.0 when empty)."""
        return _percentage(self.successful_concert_payments, self.total_records)

    @classmethod
    def from_stats(cls, stats: Stats, config: Optional[AggregationConfig] = None) -> Summary:
        """
        Build a Summary from collected statistics.

        Values missing from stats (collector disabled or failed) take their
        empty-snapshot defaults, so the result is always complete.

        Args:
            stats: Merged collector output.
            config: Aggregation configuration; supplies the known pass-type labels.

        Returns:
            Summary: The display-ready value.
        """
        if config is None:
            from registration_stats.statistics.config import AggregationConfig
            config = AggregationConfig()

        known = config.known_pass_types
        collected_counts = stats.get_value('pass_types', 'counts') or {}
        pass_type_counts = {label: int(collected_counts.get(label, 0)) for label in known}

        dominant = stats.get_value('pass_types', 'dominant')
        if dominant is None and known:
            dominant = known[0]

        return cls(
            total_records=stats.get_value('registrations', 'total_records', 0),
            successful_payments=stats.get_value('payments', 'successful_payments', 0),
            pass_type_counts=pass_type_counts,
            successful_concert_payments=stats.get_value('payments', 'successful_concert_payments', 0),
            total_event_attendances=stats.get_value('attendance', 'total_event_attendances', 0),
            college_distribution=stats.get_value('colleges', 'distribution', None) or (),
            distinct_college_count=stats.get_value('colleges', 'distinct_count', 0),
            dominant_pass_type=dominant,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary for the presentation layer.

        Keys follow the camelCase names used by registration documents.
        """
        return {
            'totalRecords': self.total_records,
            'successfulPayments': self.successful_payments,
            'passTypeCounts': dict(self.pass_type_counts),
            'successfulConcertPayments': self.successful_concert_payments,
            'totalEventAttendances': self.total_event_attendances,
            'collegeDistribution': [
                {'name': name, 'count': count} for name, count in self.college_distribution
            ],
            'distinctCollegeCount': self.distinct_college_count,
            'dominantPassType': self.dominant_pass_type,
            'paymentSuccessRate': self.payment_success_rate,
            'concertPaymentSuccessRate': self.concert_payment_success_rate,
        }
