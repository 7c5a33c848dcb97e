"""
Application service for validating, splitting and storing time entries.

The service runs the pure time engine in the order a write needs it:
backdate check, midnight split, overlap check against stored segments,
classification. Storage sits behind a simple protocol so the in-memory
adapter or a database-backed one can be plugged in.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from pendulum import Date

from ..domain.backdate import validate_backdate_limit
from ..domain.exceptions import (
    BackdateLimitError,
    EntryLockedError,
    EntryNotFoundError,
    OverlapError,
)
from ..domain.models import HourTypeTotals, TimeRange, TimeSegment, WorkingHourRule, to_day
from ..domain.overlap import check_overlap
from ..domain.segments import process_time_entry
from ..domain.splitter import split_cross_midnight
from ..schemas import TimeEntryRequest

logger = logging.getLogger(__name__)


class EntryStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    LOCKED = "LOCKED"


class ApprovalType(str, Enum):
    NONE = "NONE"
    ALL_ENTRIES = "ALL_ENTRIES"
    FULL_DAY_ONLY = "FULL_DAY_ONLY"
    EDITS_ONLY = "EDITS_ONLY"


@dataclass(frozen=True)
class StoredSegment:
    """A segment as kept by a repository, with the id and status of its entry."""
    entry_id: str
    employee_id: str
    segment: TimeSegment
    status: EntryStatus = EntryStatus.APPROVED


@dataclass(frozen=True)
class SegmentSummary:
    """Aggregated minutes over a set of segments."""
    segment_count: int
    duration_minutes: int
    hour_types: HourTypeTotals


class SegmentRepositoryProtocol(Protocol):
    """Protocol describing the storage behaviour needed by the service."""

    async def find_segments(self, employee_id: str, dates: Sequence[Date]) -> List[StoredSegment]:
        """Return the employee's stored segments on the given dates."""

    async def find_entry(self, entry_id: str) -> List[StoredSegment]:
        """Return the stored segments of one entry, empty if unknown."""

    async def save_segments(
        self,
        entry_id: str,
        employee_id: str,
        segments: Sequence[TimeSegment],
        status: EntryStatus,
    ) -> None:
        """Store the segments of one entry, replacing any stored under the same id."""

    async def delete_entry(self, entry_id: str) -> None:
        """Remove an entry and all of its segments."""


def initial_status(approval_type: ApprovalType, is_full_day: bool) -> EntryStatus:
    """Status a new entry starts in under the company's approval policy."""
    if approval_type == ApprovalType.ALL_ENTRIES:
        return EntryStatus.PENDING
    if approval_type == ApprovalType.FULL_DAY_ONLY and is_full_day:
        return EntryStatus.PENDING
    return EntryStatus.APPROVED


class TimeEntryService:
    """
    Orchestrates validation, overlap checks and segment creation.

    Callers are responsible for running ``create_entry`` inside whatever
    transaction their store offers; the service reads the latest stored
    segments on every call and keeps no state of its own.
    """

    def __init__(
        self,
        repository: SegmentRepositoryProtocol,
        rules: Sequence[WorkingHourRule],
        backdate_limit_days: int = 7,
        approval_type: ApprovalType = ApprovalType.NONE,
    ) -> None:
        self._repository = repository
        self._rules = list(rules)
        self._backdate_limit_days = backdate_limit_days
        self._approval_type = approval_type

    def preview_entry(self, request: TimeEntryRequest) -> List[TimeSegment]:
        """Split and classify an entry without touching storage."""
        return process_time_entry(
            request.date,
            request.start_time,
            request.end_time,
            self._rules,
        )

    async def create_entry(
        self,
        *,
        employee_id: str,
        request: TimeEntryRequest,
        entry_id: Optional[str] = None,
        backdate_limit_days: Optional[int] = None,
        skip_backdate_validation: bool = False,
        current_date: Optional[Date] = None,
    ) -> List[TimeSegment]:
        """
        Validate an entry, check it against stored segments and store it.

        A new entry id is generated when none is given.

        Raises:
            BackdateLimitError: If the date is outside the allowed window
            OverlapError: If any split segment collides with a stored one
        """
        if not skip_backdate_validation:
            limit = self._backdate_limit_days if backdate_limit_days is None else backdate_limit_days
            validation = validate_backdate_limit(request.date, limit, current_date)
            if not validation.valid:
                logger.info("Rejected entry for %s on %s: %s", employee_id, request.date, validation.message)
                raise BackdateLimitError(validation.message)

        time_ranges = split_cross_midnight(request.date, request.start_time, request.end_time)
        await self._ensure_no_overlap(employee_id=employee_id, time_ranges=time_ranges)

        entry_id = entry_id or uuid.uuid4().hex
        segments = self.preview_entry(request)
        status = initial_status(self._approval_type, request.is_full_day)

        await self._repository.save_segments(entry_id, employee_id, segments, status)
        logger.debug(
            "Stored entry %s with %d segment(s) for %s, status %s",
            entry_id,
            len(segments),
            employee_id,
            status.value,
        )

        return segments

    async def update_entry(
        self,
        *,
        entry_id: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> List[TimeSegment]:
        """
        Change the times of a stored entry and re-split and re-classify it.

        The entry keeps its date. Times are only replaced when both are
        given. Under the EDITS_ONLY policy, editing an approved entry sends
        it back to PENDING.

        Raises:
            EntryNotFoundError: If the entry id is unknown
            EntryLockedError: If the entry is locked
            OverlapError: If the new times collide with another stored entry
        """
        stored = await self._get_unlocked_entry(entry_id, action="edit")
        employee_id = stored[0].employee_id
        status = stored[0].status
        segments = [item.segment for item in stored]

        if start_time and end_time:
            entry_date = to_day(stored[0].segment.date)
            time_ranges = split_cross_midnight(entry_date, start_time, end_time)
            await self._ensure_no_overlap(
                employee_id=employee_id,
                time_ranges=time_ranges,
                exclude_entry_id=entry_id,
            )
            segments = process_time_entry(entry_date, start_time, end_time, self._rules)

        if self._approval_type == ApprovalType.EDITS_ONLY and status == EntryStatus.APPROVED:
            status = EntryStatus.PENDING

        await self._repository.save_segments(entry_id, employee_id, segments, status)
        logger.debug("Updated entry %s, status %s", entry_id, status.value)

        return segments

    async def delete_entry(self, *, entry_id: str) -> None:
        """
        Remove a stored entry.

        Raises:
            EntryNotFoundError: If the entry id is unknown
            EntryLockedError: If the entry is locked
        """
        await self._get_unlocked_entry(entry_id, action="delete")
        await self._repository.delete_entry(entry_id)
        logger.debug("Deleted entry %s", entry_id)

    async def fetch_existing_ranges(
        self,
        *,
        employee_id: str,
        dates: Sequence[Date],
        exclude_entry_id: Optional[str] = None,
    ) -> List[TimeRange]:
        """Stored ranges on the given dates, leaving out rejected entries."""
        stored = await self._repository.find_segments(employee_id, dates)

        return [
            item.segment.time_range
            for item in stored
            if item.status != EntryStatus.REJECTED and item.entry_id != exclude_entry_id
        ]

    async def _ensure_no_overlap(
        self,
        *,
        employee_id: str,
        time_ranges: Sequence[TimeRange],
        exclude_entry_id: Optional[str] = None,
    ) -> None:
        existing_ranges = await self.fetch_existing_ranges(
            employee_id=employee_id,
            dates=[time_range.date for time_range in time_ranges],
            exclude_entry_id=exclude_entry_id,
        )

        for time_range in time_ranges:
            result = check_overlap(time_range, existing_ranges)
            if result.has_overlap:
                logger.info(
                    "Entry %s for %s overlaps %d stored segment(s)",
                    time_range,
                    employee_id,
                    len(result.conflicting_segments),
                )
                raise OverlapError(time_range.date, result.conflicting_segments)

    async def _get_unlocked_entry(self, entry_id: str, action: str) -> List[StoredSegment]:
        stored = await self._repository.find_entry(entry_id)

        if not stored:
            raise EntryNotFoundError(f"Time entry not found: {entry_id}")

        if stored[0].status == EntryStatus.LOCKED:
            raise EntryLockedError(f"Cannot {action} a locked entry")

        return stored

    @staticmethod
    def summarize(segments: Sequence[TimeSegment]) -> SegmentSummary:
        """Total duration and hour-type minutes over a list of segments."""
        totals = HourTypeTotals()
        duration = 0

        for segment in segments:
            totals = totals + segment.hour_types
            duration += segment.duration_minutes

        return SegmentSummary(
            segment_count=len(segments),
            duration_minutes=duration,
            hour_types=totals,
        )
