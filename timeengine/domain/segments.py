"""
Turning a raw entry into stored-ready segments.
"""

from typing import List, Sequence

from pendulum import Date

from .clock import calculate_duration
from .hour_types import calculate_hour_types
from .models import TimeSegment, WorkingHourRule, to_day
from .splitter import split_cross_midnight


def process_time_entry(
    date: Date,
    start_time: str,
    end_time: str,
    rules: Sequence[WorkingHourRule]
) -> List[TimeSegment]:
    """
    Split an entry at midnight and classify each resulting segment.
    """
    segments: List[TimeSegment] = []

    for time_range in split_cross_midnight(date, start_time, end_time):
        hour_types = calculate_hour_types(time_range.start_time, time_range.end_time, rules)
        segments.append(
            TimeSegment(
                date=time_range.date,
                start_time=time_range.start_time,
                end_time=time_range.end_time,
                duration_minutes=calculate_duration(time_range.start_time, time_range.end_time),
                day_minutes=hour_types.day_minutes,
                evening_minutes=hour_types.evening_minutes,
                night_minutes=hour_types.night_minutes,
            )
        )

    return segments


def format_time_entry(segment: TimeSegment) -> str:
    """
    Format a segment for display.
    Format: YYYY-MM-DD HH:mm-HH:mm (Nmin: Day=x, Evening=y, Night=z)
    """
    date_str = to_day(segment.date).to_date_string()
    return (
        f"{date_str} {segment.start_time}-{segment.end_time} "
        f"({segment.duration_minutes}min: Day={segment.day_minutes}, "
        f"Evening={segment.evening_minutes}, Night={segment.night_minutes})"
    )
