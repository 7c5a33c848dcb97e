"""
Domain-specific exception hierarchy for the time engine application.

The engine functions themselves never raise; these are used by the service
layer to turn result objects into errors.
"""

from typing import List, Sequence

from pendulum import Date

from .models import TimeRange, to_day


class TimeEngineError(Exception):
    """Base class for all application-level errors."""


class BackdateLimitError(TimeEngineError):
    """Raised when an entry date is in the future or beyond the look-back window."""


class OverlapError(TimeEngineError):
    """Raised when a segment collides with already stored segments."""

    def __init__(self, date: Date, conflicts: Sequence[TimeRange]):
        self.date = date
        self.conflicts: List[TimeRange] = list(conflicts)
        super().__init__(
            f"Time entry overlaps with existing entry on {to_day(date).to_date_string()}"
        )


class EntryNotFoundError(TimeEngineError):
    """Raised when an entry id is not known to the repository."""


class EntryLockedError(TimeEngineError):
    """Raised when a locked entry is edited or deleted."""
