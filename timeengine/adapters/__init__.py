"""
Adapters layer - Storage integrations for time segments.
"""

from .memory_repository import InMemorySegmentRepository

__all__ = ["InMemorySegmentRepository"]
