"""
Built-in statistics collectors.

Import collectors here to automatically register them. Registration order is
the order the pipeline runs them in.
"""

from registration_stats.statistics.collectors.totals import TotalsCollector
from registration_stats.statistics.collectors.payments import PaymentsCollector
from registration_stats.statistics.collectors.pass_types import PassTypesCollector
from registration_stats.statistics.collectors.attendance import AttendanceCollector
from registration_stats.statistics.collectors.colleges import CollegesCollector

__all__ = [
    'TotalsCollector',
    'PaymentsCollector',
    'PassTypesCollector',
    'AttendanceCollector',
    'CollegesCollector',
]
