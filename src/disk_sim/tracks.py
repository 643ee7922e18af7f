"""Track domain and trace primitives — the vocabulary of head movement.

A disk surface is divided into concentric **tracks** numbered
``0 .. disk_max``.  The read/write head sits over one track at a time,
and the cost of moving it is the **seek distance**: how many tracks it
must cross.

Every scheduling algorithm records what the head does as a **trace** —
an ordered list of ``Step`` records.  Most steps service a request, but
some do not:

    - A **boundary visit** (SCAN, C-SCAN) drives the head to track 0 or
      ``disk_max`` before it turns around.
    - A **wraparound jump** (C-SCAN) flies the head back to the opposite
      edge without servicing anything on the way.

These non-serving steps carry ``served_index=None`` so that consumers
can still draw and export them as real head motion.

Invariant: a trace is *continuous*.  The first step starts at the
initial head position and every later step starts where the previous
one ended.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

# Sentinel for steps that do not service any request.
NOT_SERVED = None


def seek_distance(a: int, b: int) -> int:
    """Return the number of tracks the head crosses moving from *a* to *b*."""
    return abs(a - b)


def in_range(value: int, low: int, high: int) -> bool:
    """Return True if *value* lies within ``[low, high]`` (inclusive)."""
    return low <= value <= high


class Direction(StrEnum):
    """Initial sweep direction for the elevator-style algorithms.

    ``UP`` moves toward higher track numbers, ``DOWN`` toward track 0.
    """

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> Direction:
        """Return the direction the head travels after reversing."""
        return Direction.DOWN if self is Direction.UP else Direction.UP

    def boundary(self, disk_max: int) -> int:
        """Return the edge track the head reaches sweeping this way."""
        return disk_max if self is Direction.UP else 0


@dataclass(frozen=True)
class Step:
    """One atomic head movement.

    Attributes:
        from_track: Where the head started.
        to_track: Where the head stopped.
        distance: Tracks charged for the move (normally ``|to - from|``).
        served_index: Position of the serviced request in the input
            workload, or ``None`` for boundary visits and jumps.

    """

    from_track: int
    to_track: int
    distance: int
    served_index: int | None = NOT_SERVED

    @property
    def serves_request(self) -> bool:
        """Return True if this move satisfied a request."""
        return self.served_index is not NOT_SERVED


Trace: TypeAlias = tuple[Step, ...]
