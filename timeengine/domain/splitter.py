"""
Splitting of entries that run past midnight into single-day ranges.
"""

from typing import List

from pendulum import Date

from .clock import END_OF_DAY, START_OF_DAY, time_to_minutes
from .models import TimeRange, to_day


def split_cross_midnight(date: Date, start_time: str, end_time: str) -> List[TimeRange]:
    """
    Split an entry into one or two single-day ranges.

    The raw minute offsets decide: an end strictly after the start stays a
    single range (returned unchanged). Anything else, including equal
    times, crosses midnight and becomes start-24:00 on ``date`` plus
    00:00-end on the following day.

    Example:
    Saturday 21:00 -> 02:00
    Result: [Saturday 21:00-24:00, Sunday 00:00-02:00]

    Equal times ("20:00" to "20:00") give a second range of 00:00-20:00,
    and "20:00" to "00:00" gives a zero-length 00:00-00:00 second range.
    Stored payroll minutes depend on this, so it is kept as is.
    """
    if time_to_minutes(end_time) > time_to_minutes(start_time):
        return [TimeRange(date=date, start_time=start_time, end_time=end_time)]

    day = to_day(date)

    return [
        TimeRange(date=day, start_time=start_time, end_time=END_OF_DAY),
        TimeRange(date=day.add(days=1), start_time=START_OF_DAY, end_time=end_time),
    ]
