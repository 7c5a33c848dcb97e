"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .time_entry import (
    ApprovalType,
    EntryStatus,
    SegmentRepositoryProtocol,
    SegmentSummary,
    StoredSegment,
    TimeEntryService,
)

__all__ = [
    "ApprovalType",
    "EntryStatus",
    "SegmentRepositoryProtocol",
    "SegmentSummary",
    "StoredSegment",
    "TimeEntryService",
]
