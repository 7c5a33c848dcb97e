"""
Request validation for time entries.

Everything the engine receives passes through here first, so the domain
functions can assume well-formed clock strings.
"""

import re
from datetime import date as _date
from typing import Optional

from pydantic import BaseModel, field_validator

CLOCK_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$|^24:00$")


def validate_clock_time(value: str) -> str:
    """Ensure a value is "HH:mm" (00:00-23:59) or the "24:00" marker."""
    if not CLOCK_TIME_PATTERN.match(value):
        raise ValueError(f"Invalid time format (HH:mm): {value!r}")
    return value


class TimeEntryRequest(BaseModel):
    """A submitted time entry before splitting."""
    date: _date
    start_time: str
    end_time: str
    notes: Optional[str] = None
    is_full_day: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return validate_clock_time(v)
