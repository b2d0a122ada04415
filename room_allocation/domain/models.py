"""Domain models for room allocation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    original_index: int
    arrival: int
    departure: int


@dataclass(frozen=True, order=True)
class RoomOccupancy:
    """Heap entry for a room in use; orders by ``free_at`` first."""

    free_at: int
    room_id: int


@dataclass(frozen=True)
class AllocationResult:
    room_count: int
    assignments: list[int]
