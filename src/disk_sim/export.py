"""Export — presenting traces and metrics outside the simulator.

Traces leave the simulator in three shapes:

- **CSV rows** ``(step, from, to, distance)``, one per step, numbered
  from 1.  Boundary visits and jumps are real head motion, so they are
  exported like any other row.
- **JSON-ready dicts** for the web API.
- **Plain text** tables and comparison lines for the shell.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from disk_sim.dispatcher import SimulationResult
    from disk_sim.metrics import Metrics
    from disk_sim.tracks import Step, Trace

CSV_HEADER = ("step", "from", "to", "distance")


def trace_rows(trace: Trace) -> list[tuple[int, int, int, int]]:
    """Return ``(sequence_number, from, to, distance)`` for every step."""
    return [
        (number, step.from_track, step.to_track, step.distance)
        for number, step in enumerate(trace, start=1)
    ]


def trace_to_csv(trace: Trace) -> str:
    """Render *trace* as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(trace_rows(trace))
    return buffer.getvalue()


def step_to_dict(step: Step) -> dict[str, int | None]:
    """Return a JSON-ready dict for one step."""
    return {
        "from": step.from_track,
        "to": step.to_track,
        "distance": step.distance,
        "served_index": step.served_index,
    }


def metrics_to_dict(metrics: Metrics) -> dict[str, int | float]:
    """Return a JSON-ready dict for a metrics record."""
    return {
        "total_movement": metrics.total_movement,
        "avg_seek": metrics.avg_seek,
        "served_count": metrics.served_count,
    }


def result_to_dict(result: SimulationResult) -> dict[str, object]:
    """Return a JSON-ready dict for a full simulation result."""
    return {
        "algorithm": result.algorithm.value,
        "trace": [step_to_dict(step) for step in result.trace],
        "metrics": metrics_to_dict(result.metrics),
    }


def format_trace(trace: Trace) -> str:
    """Format *trace* as a table, marking non-serving steps."""
    if not trace:
        return "(empty trace)"
    lines = ["STEP   FROM   TO     DIST   REQUEST"]
    for number, step in enumerate(trace, start=1):
        request = f"#{step.served_index}" if step.serves_request else "-"
        lines.append(
            f"{number:<6} {step.from_track:<6} {step.to_track:<6} {step.distance:<6} {request}"
        )
    return "\n".join(lines)


def format_comparison(results: Iterable[SimulationResult]) -> str:
    """Format one ``NAME: total=…, avg=…, served=…`` line per result."""
    return "\n".join(f"{result.algorithm.value}: {result.metrics}" for result in results)
