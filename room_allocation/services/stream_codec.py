"""Text stream format for allocation input and output."""

from __future__ import annotations

import re

from room_allocation.domain.models import AllocationResult, Interval


_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class MalformedInputError(Exception):
    """Raised when the input stream cannot satisfy the declared customer count."""


def _read_int(tokens: list[str], position: int, name: str) -> int:
    if position >= len(tokens):
        raise MalformedInputError(f"input ended before {name}")
    token = tokens[position]
    # int() alone would also take "1_000" and non-ASCII digits
    if not _INTEGER_TOKEN.fullmatch(token):
        raise MalformedInputError(f"{name} is not an integer: {token!r}")
    return int(token)


def parse_intervals(text: str) -> list[Interval]:
    """Parse ``n`` followed by ``n`` arrival/departure pairs.

    Tokens are whitespace separated; line breaks carry no meaning and tokens
    past the last pair are ignored.
    """
    tokens = text.split()
    count = _read_int(tokens, 0, "customer count")
    if count < 0:
        raise MalformedInputError("customer count must be >= 0")

    intervals: list[Interval] = []
    for index in range(count):
        position = 1 + 2 * index
        arrival = _read_int(tokens, position, f"arrival of customer {index}")
        departure = _read_int(tokens, position + 1, f"departure of customer {index}")
        intervals.append(
            Interval(original_index=index, arrival=arrival, departure=departure)
        )
    return intervals


def format_result(result: AllocationResult) -> str:
    rooms = "".join(f"{room_id} " for room_id in result.assignments)
    return f"{result.room_count}\n{rooms}\n"
