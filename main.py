"""
main.py: Stream entry point.

Reads the customer count and arrival/departure pairs from stdin and writes
the room count and per-customer room ids to stdout:

    python main.py < customers.txt

Malformed or truncated input produces no output.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from room_allocation.services.allocation_service import RoomAllocationService
from room_allocation.services.stream_codec import (
    MalformedInputError,
    format_result,
    parse_intervals,
)
from room_allocation.utils.logger import get_logger


logger = get_logger(__name__)


def run(
    stdin: TextIO,
    stdout: TextIO,
    service: Optional[RoomAllocationService] = None,
) -> int:
    try:
        intervals = parse_intervals(stdin.read())
    except MalformedInputError as exc:
        logger.info("Input rejected | reason=%s", exc)
        return 0

    result = (service or RoomAllocationService()).allocate(intervals)
    stdout.write(format_result(result))
    stdout.flush()
    return 0


def main() -> int:
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
