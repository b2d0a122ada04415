"""Domain-level rules for sharing a room between customers."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from room_allocation.domain.models import Interval


def can_share_room(previous_departure: int, next_arrival: int) -> bool:
    """A room is free only if its occupant left strictly before the arrival."""
    return previous_departure < next_arrival


def find_room_conflicts(
    intervals: Sequence[Interval],
    assignments: Sequence[int],
) -> list[tuple[int, int]]:
    """Return index pairs of consecutive occupants of a room whose stays overlap.

    The result is empty iff every room holds a strictly sequential run of stays.
    """
    if len(intervals) != len(assignments):
        raise ValueError("assignments must hold one room per interval")

    by_room: dict[int, list[Interval]] = defaultdict(list)
    for interval in intervals:
        by_room[assignments[interval.original_index]].append(interval)

    conflicts: list[tuple[int, int]] = []
    for occupants in by_room.values():
        occupants.sort(key=lambda item: (item.arrival, item.departure, item.original_index))
        for previous, current in zip(occupants, occupants[1:]):
            if not can_share_room(previous.departure, current.arrival):
                conflicts.append((previous.original_index, current.original_index))
    return conflicts
