"""
Domain models for time entries, working-hour rules and engine results.

Clock times are kept as "HH:mm" strings throughout; "24:00" is allowed as an
end-of-day marker. Dates are calendar days (``pendulum.Date``).
"""

from dataclasses import dataclass, field
from datetime import date as _date
from typing import List, Optional

import pendulum
from pendulum import Date


def to_day(value: _date) -> Date:
    """Truncate a date or datetime to its calendar day."""
    return pendulum.date(value.year, value.month, value.day)


@dataclass(frozen=True)
class TimeRange:
    """
    One contiguous work interval anchored to a single calendar date.

    After splitting, end_time is always later than start_time on the same
    date; no implicit wraparound remains.
    """
    date: Date
    start_time: str
    end_time: str

    def __str__(self) -> str:
        return f"{to_day(self.date).to_date_string()} {self.start_time}-{self.end_time}"


@dataclass(frozen=True)
class WorkingHourRule:
    """
    A named window of the day, e.g. Day 08:00-18:00.

    end_time earlier than start_time means the window wraps midnight
    (Night 22:00-08:00).
    """
    name: str
    start_time: str
    end_time: str


@dataclass(frozen=True)
class HourTypeTotals:
    """Minutes attributed to the day, evening and night categories."""
    day_minutes: int = 0
    evening_minutes: int = 0
    night_minutes: int = 0

    def __add__(self, other: "HourTypeTotals") -> "HourTypeTotals":
        return HourTypeTotals(
            day_minutes=self.day_minutes + other.day_minutes,
            evening_minutes=self.evening_minutes + other.evening_minutes,
            night_minutes=self.night_minutes + other.night_minutes,
        )


@dataclass(frozen=True)
class OverlapCheckResult:
    has_overlap: bool
    conflicting_segments: List[TimeRange] = field(default_factory=list)


@dataclass(frozen=True)
class BackdateValidation:
    valid: bool
    message: Optional[str] = None


@dataclass(frozen=True)
class TimeSegment:
    """
    A split, classified piece of a time entry, ready to be stored.
    """
    date: Date
    start_time: str
    end_time: str
    duration_minutes: int
    day_minutes: int
    evening_minutes: int
    night_minutes: int

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(date=self.date, start_time=self.start_time, end_time=self.end_time)

    @property
    def hour_types(self) -> HourTypeTotals:
        return HourTypeTotals(
            day_minutes=self.day_minutes,
            evening_minutes=self.evening_minutes,
            night_minutes=self.night_minutes,
        )
