"""
In-memory segment store for the CLI and tests.
"""

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Dict, List, Sequence

import pendulum
from pendulum import Date

from ..domain.models import TimeSegment, WorkingHourRule, to_day
from ..domain.segments import process_time_entry
from ..schemas import validate_clock_time
from ..services.time_entry import EntryStatus, StoredSegment

logger = logging.getLogger(__name__)


class InMemorySegmentRepository:
    """
    Segment repository that keeps everything in a dict keyed by entry id.

    Instances are injected into the service rather than shared at module
    level; a lock guards the dict so concurrent callers see whole entries.
    Employee ids are matched case-insensitively.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, List[StoredSegment]] = {}
        self._lock = threading.Lock()

    async def find_segments(self, employee_id: str, dates: Sequence[Date]) -> List[StoredSegment]:
        days = {to_day(d) for d in dates}
        key = employee_id.lower()

        with self._lock:
            return [
                item
                for stored in self._entries.values()
                for item in stored
                if item.employee_id.lower() == key and to_day(item.segment.date) in days
            ]

    async def find_entry(self, entry_id: str) -> List[StoredSegment]:
        with self._lock:
            return list(self._entries.get(entry_id, []))

    async def save_segments(
        self,
        entry_id: str,
        employee_id: str,
        segments: Sequence[TimeSegment],
        status: EntryStatus,
    ) -> None:
        self._store(entry_id, employee_id, segments, status)

    async def delete_entry(self, entry_id: str) -> None:
        with self._lock:
            self._entries.pop(entry_id, None)

    def all_segments(self, employee_id: str) -> List[StoredSegment]:
        """Every stored segment for an employee, in insertion order."""
        key = employee_id.lower()

        with self._lock:
            return [
                item
                for stored in self._entries.values()
                for item in stored
                if item.employee_id.lower() == key
            ]

    def _store(
        self,
        entry_id: str,
        employee_id: str,
        segments: Sequence[TimeSegment],
        status: EntryStatus,
    ) -> None:
        with self._lock:
            self._entries[entry_id] = [
                StoredSegment(entry_id=entry_id, employee_id=employee_id, segment=segment, status=status)
                for segment in segments
            ]

    def load_json(self, data_file: Path, rules: Sequence[WorkingHourRule]) -> int:
        """
        Seed the store from a JSON list of entries.

        Each record needs ``employee_id``, ``date`` (YYYY-MM-DD),
        ``start_time`` and ``end_time``; ``status`` defaults to APPROVED
        and ``entry_id`` is generated when missing. Entries are split and
        classified like new ones. Invalid records are skipped with a
        warning.

        Returns:
            Number of entries loaded
        """
        with open(data_file, "r", encoding="utf-8") as f:
            records = json.load(f)

        if not isinstance(records, list):
            raise ValueError(f"{data_file} must contain a list of entries.")

        loaded = 0
        for record in records:
            try:
                employee_id = record["employee_id"]
                if not isinstance(employee_id, str) or not employee_id:
                    raise TypeError(f"employee_id must be a non-empty string, got {employee_id!r}")
                entry_id = str(record.get("entry_id") or uuid.uuid4().hex)
                entry_date = pendulum.from_format(record["date"], "YYYY-MM-DD").date()
                segments = process_time_entry(
                    entry_date,
                    validate_clock_time(record["start_time"]),
                    validate_clock_time(record["end_time"]),
                    rules,
                )
                status = EntryStatus(record.get("status", EntryStatus.APPROVED.value))
            except (KeyError, ValueError, TypeError, AttributeError) as exc:
                logger.warning("Skipping invalid entry %r in %s: %s", record, data_file, exc)
                continue

            self._store(entry_id, employee_id, segments, status)
            loaded += 1

        logger.debug("Loaded %d entries from %s", loaded, data_file)
        return loaded
