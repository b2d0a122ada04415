"""Tests for room-sharing rules."""

from __future__ import annotations

import pytest

from room_allocation.domain.constraints import can_share_room, find_room_conflicts
from room_allocation.domain.models import Interval


def test_room_is_free_when_departure_precedes_arrival() -> None:
    assert can_share_room(previous_departure=3, next_arrival=4)


def test_room_is_busy_at_same_instant_handoff() -> None:
    assert not can_share_room(previous_departure=4, next_arrival=4)


def test_room_is_busy_when_stays_overlap() -> None:
    assert not can_share_room(previous_departure=10, next_arrival=4)


def test_no_conflicts_for_sequential_stays() -> None:
    intervals = [
        Interval(original_index=0, arrival=1, departure=2),
        Interval(original_index=1, arrival=2, departure=4),
        Interval(original_index=2, arrival=4, departure=4),
    ]

    assert find_room_conflicts(intervals, [1, 2, 1]) == []


def test_conflict_reported_for_touching_stays_in_same_room() -> None:
    intervals = [
        Interval(original_index=0, arrival=1, departure=3),
        Interval(original_index=1, arrival=3, departure=5),
    ]

    assert find_room_conflicts(intervals, [1, 1]) == [(0, 1)]


def test_conflict_found_regardless_of_input_order() -> None:
    intervals = [
        Interval(original_index=0, arrival=5, departure=8),
        Interval(original_index=1, arrival=7, departure=9),
        Interval(original_index=2, arrival=1, departure=2),
    ]

    assert find_room_conflicts(intervals, [1, 1, 1]) == [(0, 1)]


def test_assignment_length_mismatch_raises() -> None:
    intervals = [Interval(original_index=0, arrival=1, departure=2)]

    with pytest.raises(ValueError):
        find_room_conflicts(intervals, [])
