"""Session log — what happened during an interactive simulation.

Front ends show two views of the same history:

- ``log [level]`` lists every event at or above a level: workloads
  loaded, settings changed, requests clamped, runs completed.
- ``history`` lists only the completed runs, each with the algorithm
  and the metrics it achieved, so runs under different settings can be
  compared after the fact.

A run is therefore not a formatted sentence but a ``RunRecord`` carried
by its log entry.  The scheduling algorithms never log; only the
session layer around them writes here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disk_sim.metrics import Metrics


class LogLevel(IntEnum):
    """Severity of a session event; ordered so ``>=`` selects a minimum."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def parse(cls, name: str) -> LogLevel:
        """Look up a level by case-insensitive name, or raise ``ValueError``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            msg = f"unknown log level '{name}'"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class RunRecord:
    """The outcome of one completed run.

    Attributes:
        number: 1-based position among the session's runs.
        algorithm: Display name of the algorithm that ran.
        head_start: Where the head started.
        metrics: Movement totals of the run.

    """

    number: int
    algorithm: str
    head_start: int
    metrics: Metrics

    def __str__(self) -> str:
        """Format as ``#n ALG from head: metrics``."""
        return f"#{self.number} {self.algorithm} from {self.head_start}: {self.metrics}"


@dataclass(frozen=True)
class LogEntry:
    """One session event, optionally carrying a completed run."""

    level: LogLevel
    message: str
    run: RunRecord | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] message``, plus the run when there is one."""
        if self.run is None:
            return f"[{self.level.name}] {self.message}"
        return f"[{self.level.name}] {self.message}: {self.run}"


class SessionLog:
    """Append-only, in-memory history of one simulation session."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[LogEntry] = []

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    @property
    def entries(self) -> list[LogEntry]:
        """Return all entries in chronological order (a copy)."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str) -> None:
        """Record a plain event."""
        self._entries.append(LogEntry(level, message))

    def record_run(self, algorithm: str, head_start: int, metrics: Metrics) -> RunRecord:
        """Record a completed run at INFO level and return its record."""
        run = RunRecord(len(self.runs()) + 1, algorithm, head_start, metrics)
        self._entries.append(LogEntry(LogLevel.INFO, "run complete", run))
        return run

    def at_least(self, level: LogLevel) -> list[LogEntry]:
        """Return the entries at or above *level*."""
        return [e for e in self._entries if e.level >= level]

    def runs(self) -> list[RunRecord]:
        """Return every recorded run, oldest first."""
        return [e.run for e in self._entries if e.run is not None]

    def best_run(self) -> RunRecord | None:
        """Return the run with the least total movement (earliest on ties)."""
        return min(self.runs(), key=lambda r: r.metrics.total_movement, default=None)

    def clear(self) -> None:
        """Forget every entry, runs included."""
        self._entries.clear()
