"""
Configuration for registration statistics.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple
import yaml

logger = logging.getLogger(__name__)

DEFAULT_PASS_TYPES: Tuple[str, ...] = ("General", "Hackathon", "Signature")
DEFAULT_EVENT_ATTENDANCE_FIELDS: Tuple[str, ...] = ("event1", "event2", "event3", "event4", "event5")
DEFAULT_TOP_COLLEGE_LIMIT = 10
SUCCESS_STATUS = "Successful"

# Collectors every Summary field depends on; they cannot be switched off
CORE_COLLECTOR_IDS: Tuple[str, ...] = ("totals", "payments", "pass_types", "attendance", "colleges")

# camelCase option names accepted in dicts and YAML files
OPTION_ALIASES: Dict[str, str] = {
    'knownPassTypes': 'known_pass_types',
    'eventAttendanceFields': 'event_attendance_fields',
    'topCollegeLimit': 'top_college_limit',
    'successStatus': 'success_status',
}


def _ordered_unique(values: Iterable[Any]) -> Tuple[str, ...]:
    """Tuple of the values with duplicates removed, first occurrence kept."""
    if isinstance(values, str):
        values = [values]
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass
class AggregationConfig:
    """
    Configuration for registration statistics.

    Attributes:
        known_pass_types: Ordered pass-type labels to count and report
        event_attendance_fields: Ordered attendance slot names to sum over
        top_college_limit: Maximum number of entries in the college distribution
        success_status: Status string counted as a successful payment (exact match)
        collectors: Dict of collector_id -> enabled status (core collectors stay enabled)
        config_file: Path to YAML config file (optional)
    """
    known_pass_types: Tuple[str, ...] = DEFAULT_PASS_TYPES
    event_attendance_fields: Tuple[str, ...] = DEFAULT_EVENT_ATTENDANCE_FIELDS
    top_college_limit: int = DEFAULT_TOP_COLLEGE_LIMIT
    success_status: str = SUCCESS_STATUS
    collectors: Dict[str, bool] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if given, then normalise options."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()
        self._normalise()

    def _normalise(self) -> None:
        self.known_pass_types = _ordered_unique(self.known_pass_types)
        self.event_attendance_fields = _ordered_unique(self.event_attendance_fields)
        if isinstance(self.top_college_limit, bool) or not isinstance(self.top_college_limit, int):
            raise ValueError(f"top_college_limit must be an integer, got {self.top_college_limit!r}")
        if self.top_college_limit < 0:
            raise ValueError(f"top_college_limit must not be negative, got {self.top_college_limit}")

        if not isinstance(self.collectors, dict):
            logger.warning(f"Ignoring collector settings {self.collectors!r}: not a mapping")
            self.collectors = {}
        for collector_id in CORE_COLLECTOR_IDS:
            if self.collectors.get(collector_id, True) is False:
                logger.warning(f"Collector {collector_id} is required for the summary and cannot be disabled")
                del self.collectors[collector_id]

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section from the YAML file: aggregation options
        at the top of the section and collector enable/disable settings under
        'collectors'.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")
            return

        statistics_config = data.get('statistics', {}) if isinstance(data, dict) else {}
        if not isinstance(statistics_config, dict):
            logger.warning(f"Ignoring 'statistics' section of {self.config_file}: not a mapping")
            return

        for key, value in _canonical_options(statistics_config).items():
            setattr(self, key, value)

        # Load collector enabled/disabled settings
        collectors_config = statistics_config.get('collectors', {}) or {}
        if not isinstance(collectors_config, dict):
            logger.warning(f"Ignoring 'collectors' section of {self.config_file}: not a mapping")
            collectors_config = {}
        for collector_id, settings in collectors_config.items():
            if isinstance(settings, dict):
                self.collectors[collector_id] = settings.get('enabled', True)
            elif isinstance(settings, bool):
                self.collectors[collector_id] = settings

        logger.info(f"Loaded statistics config from {self.config_file}")

    def is_enabled(self, collector_id: str) -> bool:
        """
        Check if a collector is enabled.

        Args:
            collector_id: Identifier of the collector to check

        Collectors in CORE_COLLECTOR_IDS are always enabled.

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        if collector_id in CORE_COLLECTOR_IDS:
            return True
        return self.collectors.get(collector_id, True)

    def collector_options(self) -> Dict[str, Any]:
        """Options handed to collectors that declare a field of the same name."""
        return {
            'known_pass_types': self.known_pass_types,
            'event_attendance_fields': self.event_attendance_fields,
            'top_college_limit': self.top_college_limit,
            'success_status': self.success_status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AggregationConfig:
        """
        Create configuration from dictionary.

        Useful for testing and programmatic configuration. Accepts both
        snake_case and camelCase option names.

        Args:
            data: Dictionary of options, with an optional 'collectors' key
                mapping collector_id to enabled status

        Returns:
            AggregationConfig instance
        """
        options = _canonical_options(data)
        collectors = data.get('collectors', {}) or {}
        if not isinstance(collectors, dict):
            logger.warning(f"Ignoring collector settings {collectors!r}: not a mapping")
            collectors = {}
        return cls(collectors=dict(collectors), **options)


def _canonical_options(data: Dict[str, Any]) -> Dict[str, Any]:
    options = {}
    for key, value in data.items():
        name = OPTION_ALIASES.get(key, key)
        if name in ('known_pass_types', 'event_attendance_fields', 'top_college_limit', 'success_status'):
            options[name] = value
    return options
