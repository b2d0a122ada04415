"""Earliest-free-room allocation of customers to rooms."""

from __future__ import annotations

import heapq
from typing import Optional, Sequence

from room_allocation.domain.constraints import can_share_room, find_room_conflicts
from room_allocation.domain.models import AllocationResult, Interval, RoomOccupancy
from room_allocation.utils.config import Settings, get_settings
from room_allocation.utils.logger import get_logger


logger = get_logger(__name__)


class AllocationInvariantError(Exception):
    """Raised when a computed assignment fails verification."""


def allocate_rooms(intervals: Sequence[Interval]) -> AllocationResult:
    """Assign every interval a room while using the fewest rooms.

    Intervals are swept in ascending arrival order (ties by original index).
    The room that frees earliest is reused when its occupant departed strictly
    before the current arrival; otherwise a new room id is opened. Callers
    must guarantee ``arrival <= departure`` for every interval.
    """
    ordered = sorted(intervals, key=lambda item: (item.arrival, item.original_index))
    occupied: list[RoomOccupancy] = []
    assignments = [0] * len(intervals)
    last_room_id = 0

    for interval in ordered:
        if occupied and can_share_room(occupied[0].free_at, interval.arrival):
            room_id = heapq.heappop(occupied).room_id
        else:
            last_room_id += 1
            room_id = last_room_id

        heapq.heappush(occupied, RoomOccupancy(free_at=interval.departure, room_id=room_id))
        assignments[interval.original_index] = room_id

    return AllocationResult(room_count=last_room_id, assignments=assignments)


def peak_occupancy(intervals: Sequence[Interval]) -> int:
    """Largest number of stays that overlap at a single instant.

    Stays are closed ranges, so an arrival at ``t`` is counted before a
    departure at ``t``.
    """
    events: list[tuple[int, int]] = []
    for interval in intervals:
        events.append((interval.arrival, 0))
        events.append((interval.departure, 1))
    events.sort()

    current = 0
    peak = 0
    for _, kind in events:
        if kind == 0:
            current += 1
            peak = max(peak, current)
        else:
            current -= 1
    return peak


class RoomAllocationService:
    """Runs room allocation with optional verification of the result."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    @property
    def max_customers(self) -> int:
        return self._settings.allocation_max_customers

    def allocate(self, intervals: Sequence[Interval]) -> AllocationResult:
        result = allocate_rooms(intervals)
        if self._settings.allocation_verify_assignments:
            self._verify(intervals, result)

        logger.info(
            "Room allocation completed | customers=%s | rooms=%s",
            len(intervals),
            result.room_count,
        )
        return result

    def _verify(self, intervals: Sequence[Interval], result: AllocationResult) -> None:
        conflicts = find_room_conflicts(intervals, result.assignments)
        if conflicts:
            logger.error("Room conflicts detected | pairs=%s", conflicts[:10])
            raise AllocationInvariantError(
                f"{len(conflicts)} customer pairs share a room with overlapping stays"
            )

        peak = peak_occupancy(intervals)
        if result.room_count != peak:
            logger.error(
                "Room count mismatch | rooms=%s | peak_occupancy=%s",
                result.room_count,
                peak,
            )
            raise AllocationInvariantError(
                f"room_count {result.room_count} differs from peak occupancy {peak}"
            )
        logger.debug("Allocation verified | rooms=%s", result.room_count)
