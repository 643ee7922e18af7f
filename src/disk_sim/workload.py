"""Workloads — building the request queue the scheduler consumes.

The scheduling core expects clean input: a sequence of integer tracks,
each within ``0 .. disk_max``.  This module produces exactly that from
the ways a user supplies requests:

- **Free text** — ``"95, 180 34"``: numbers separated by commas and/or
  whitespace.  Anything that is not an integer is an error; integers
  outside the disk are clamped to the nearest edge.
- **CSV** — a spreadsheet export.  Every numeric cell is taken in
  row-major order; decimals are truncated toward zero, and headers and
  other non-numeric cells are skipped.
- **Random** — a uniform sample of tracks, for quick experiments.
"""

from __future__ import annotations

import csv
import io
import random
import re
from decimal import Decimal

# The classic demo queue: head at 50 on a 200-track disk.
SAMPLE_WORKLOAD: tuple[int, ...] = (95, 180, 34, 119, 11, 123, 62, 64)

_SEPARATORS = re.compile(r"[,\s]+")
_NUMERIC_CELL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


class WorkloadError(Exception):
    """Raise when a workload cannot be built from the given input."""


def clamp(track: int, disk_max: int) -> int:
    """Return *track* pulled into ``0 .. disk_max``."""
    return max(0, min(track, disk_max))


def parse_requests(text: str, disk_max: int) -> list[int]:
    """Parse comma- or whitespace-separated track numbers.

    Args:
        text: Raw user input, e.g. ``"95,180, 34 119"``.
        disk_max: Highest valid track; larger values are clamped to it.

    Returns:
        The requests in input order.

    Raises:
        WorkloadError: If a token is not an integer.

    """
    requests: list[int] = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        try:
            track = int(token)
        except ValueError:
            msg = f"'{token}' is not a track number"
            raise WorkloadError(msg) from None
        requests.append(clamp(track, disk_max))
    return requests


def parse_csv(text: str) -> list[int]:
    """Collect every numeric cell of a CSV document, row by row.

    Spreadsheets often store tracks as ``12.0``; decimal cells are
    truncated toward zero (``12.9`` becomes 12).  Cells that are not
    numbers, such as a ``track`` header, are skipped.
    """
    requests: list[int] = []
    for row in csv.reader(io.StringIO(text)):
        for cell in row:
            stripped = cell.strip()
            if _NUMERIC_CELL.fullmatch(stripped):
                requests.append(int(Decimal(stripped)))
    return requests


def random_workload(count: int, disk_max: int, *, rng: random.Random | None = None) -> list[int]:
    """Return *count* tracks drawn uniformly from ``0 .. disk_max``.

    Args:
        count: Number of requests to generate.
        disk_max: Highest track number.
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible workloads.

    Raises:
        WorkloadError: If *count* is negative.

    """
    if count < 0:
        msg = f"request count must be non-negative (got {count})"
        raise WorkloadError(msg)
    source = rng if rng is not None else random.Random()  # noqa: S311
    return [source.randint(0, disk_max) for _ in range(count)]
