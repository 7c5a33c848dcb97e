"""
Backdate window validation for entry dates.
"""

from datetime import date as _date
from typing import Optional

import pendulum

from .models import BackdateValidation, to_day


def validate_backdate_limit(
    entry_date: _date,
    backdate_limit_days: int,
    current_date: Optional[_date] = None
) -> BackdateValidation:
    """
    Check that an entry date lies between today and the allowed look-back.

    Both bounds are inclusive: today and exactly ``backdate_limit_days``
    days ago are valid.

    Args:
        entry_date: Date of the entry (datetimes are truncated to the day)
        backdate_limit_days: How many days back entries may be dated
        current_date: "Today"; defaults to the local current date

    Returns:
        BackdateValidation with a message when invalid
    """
    today = to_day(current_date if current_date is not None else pendulum.today())
    entry_day = to_day(entry_date)

    if entry_day > today:
        return BackdateValidation(
            valid=False,
            message="Cannot create time entries for future dates"
        )

    earliest_allowed = today.subtract(days=backdate_limit_days)

    if entry_day < earliest_allowed:
        return BackdateValidation(
            valid=False,
            message=f"Cannot create time entries older than {backdate_limit_days} days"
        )

    return BackdateValidation(valid=True)
