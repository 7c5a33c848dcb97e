"""
Domain layer - Pure time engine logic without external dependencies.
"""

from .backdate import validate_backdate_limit
from .clock import calculate_duration, minutes_to_time, time_to_minutes
from .hour_types import calculate_hour_types, calculate_rule_minutes
from .models import (
    BackdateValidation,
    HourTypeTotals,
    OverlapCheckResult,
    TimeRange,
    TimeSegment,
    WorkingHourRule,
)
from .overlap import check_overlap, do_ranges_overlap
from .segments import format_time_entry, process_time_entry
from .splitter import split_cross_midnight

__all__ = [
    "BackdateValidation",
    "HourTypeTotals",
    "OverlapCheckResult",
    "TimeRange",
    "TimeSegment",
    "WorkingHourRule",
    "calculate_duration",
    "calculate_hour_types",
    "calculate_rule_minutes",
    "check_overlap",
    "do_ranges_overlap",
    "format_time_entry",
    "minutes_to_time",
    "process_time_entry",
    "split_cross_midnight",
    "time_to_minutes",
    "validate_backdate_limit",
]
