"""
Overlap detection between time ranges.
"""

from typing import List, Sequence

from .clock import MINUTES_PER_DAY, time_to_minutes
from .models import OverlapCheckResult, TimeRange, to_day


def do_ranges_overlap(start1: int, end1: int, start2: int, end2: int) -> bool:
    """
    Check if two half-open minute ranges intersect.

    An end at or before its start is pushed past midnight. Touching
    endpoints do not count, so back-to-back ranges are allowed.
    """
    range1_end = end1 + MINUTES_PER_DAY if end1 <= start1 else end1
    range2_end = end2 + MINUTES_PER_DAY if end2 <= start2 else end2

    return start1 < range2_end and start2 < range1_end


def check_overlap(
    new_entry: TimeRange,
    existing_entries: Sequence[TimeRange]
) -> OverlapCheckResult:
    """
    Find every existing range on the same day that collides with new_entry.

    Ranges are compared within their own date only; callers split
    cross-midnight entries first so each range is single-day.
    """
    new_day = to_day(new_entry.date)
    new_start = time_to_minutes(new_entry.start_time)
    new_end = time_to_minutes(new_entry.end_time)
    conflicting: List[TimeRange] = []

    for existing in existing_entries:
        if to_day(existing.date) != new_day:
            continue

        existing_start = time_to_minutes(existing.start_time)
        existing_end = time_to_minutes(existing.end_time)

        if do_ranges_overlap(new_start, new_end, existing_start, existing_end):
            conflicting.append(existing)

    return OverlapCheckResult(
        has_overlap=bool(conflicting),
        conflicting_segments=conflicting
    )
