"""Performance metrics — reducing a trace to a few comparable numbers.

Three figures summarise a scheduling run:

- **total_movement** — every track the head crossed, including boundary
  visits and any charged C-SCAN jump.  This is the cost being minimised.
- **served_count** — how many steps actually serviced a request.
- **avg_seek** — ``total_movement / served_count``: the average travel
  paid per serviced request (0.0 when nothing was serviced).

``compute_metrics`` is a pure reduction: calling it twice on the same
trace gives identical results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disk_sim.tracks import Trace


@dataclass(frozen=True)
class Metrics:
    """Aggregate statistics for one trace."""

    total_movement: int
    avg_seek: float
    served_count: int

    def __str__(self) -> str:
        """Format as ``total=…, avg=…, served=…``."""
        return (
            f"total={self.total_movement:.1f}, avg={self.avg_seek:.2f}, served={self.served_count}"
        )


def compute_metrics(trace: Trace) -> Metrics:
    """Summarise *trace* as total movement, average seek and served count."""
    total = sum(step.distance for step in trace)
    served = sum(1 for step in trace if step.serves_request)
    avg = total / served if served else 0.0
    return Metrics(total_movement=total, avg_seek=avg, served_count=served)
