"""
Classification of entry minutes into working-hour rule categories.

Rules are taken as given: if they overlap each other, minutes are counted
once per matching rule.
"""

from typing import Dict, Sequence

from .clock import MINUTES_PER_DAY, end_minutes, time_to_minutes
from .models import HourTypeTotals, WorkingHourRule

DAY = "day"
EVENING = "evening"
NIGHT = "night"


def _window_overlap(entry_start: int, entry_end: int, window_start: int, window_end: int) -> int:
    return max(0, min(entry_end, window_end) - max(entry_start, window_start))


def _rule_overlap(entry_start: int, entry_end: int, rule_start: int, rule_end: int) -> int:
    """
    Overlap minutes between an entry and a rule window.

    A wrapping rule (Night 22:00-08:00) is handled as its two halves,
    [rule_start, 24:00) and [00:00, rule_end), neither of which wraps.
    """
    if rule_end < rule_start:
        return (
            _window_overlap(entry_start, entry_end, rule_start, MINUTES_PER_DAY)
            + _window_overlap(entry_start, entry_end, 0, rule_end)
        )

    return _window_overlap(entry_start, entry_end, rule_start, rule_end)


def calculate_rule_minutes(
    start_time: str,
    end_time: str,
    rules: Sequence[WorkingHourRule]
) -> Dict[str, int]:
    """
    Overlap minutes per rule, keyed by lower-cased rule name.

    Rules sharing a name (ignoring case) are summed. The entry should be a
    single-day segment; an end at or before the start is pushed past
    midnight.
    """
    entry_start = time_to_minutes(start_time)
    entry_end = end_minutes(end_time)

    if entry_end <= entry_start:
        entry_end += MINUTES_PER_DAY

    minutes: Dict[str, int] = {}

    for rule in rules:
        overlap = _rule_overlap(
            entry_start,
            entry_end,
            time_to_minutes(rule.start_time),
            time_to_minutes(rule.end_time),
        )
        key = rule.name.lower()
        minutes[key] = minutes.get(key, 0) + overlap

    return minutes


def calculate_hour_types(
    start_time: str,
    end_time: str,
    rules: Sequence[WorkingHourRule]
) -> HourTypeTotals:
    """
    Day, evening and night minutes for one segment.

    Rules named anything other than day/evening/night (any case) are
    computed but do not count towards any bucket.
    """
    minutes = calculate_rule_minutes(start_time, end_time, rules)

    return HourTypeTotals(
        day_minutes=minutes.get(DAY, 0),
        evening_minutes=minutes.get(EVENING, 0),
        night_minutes=minutes.get(NIGHT, 0),
    )
