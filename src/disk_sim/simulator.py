"""Simulation session — a workload, a config and an algorithm choice.

The scheduling functions are stateless.  Interactive front ends (the
shell, a UI) still need somewhere to keep "the current requests" and
"the current settings" between commands; ``DiskSimulator`` is that
place.  It ties a request queue to a configuration and a selected
algorithm, runs the dispatcher on demand, and logs what it does.

Running does not consume the queue: the same workload can be re-run
under different algorithms or settings, which is the whole point of a
simulator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from disk_sim.config import SimulationConfig
from disk_sim.dispatcher import Algorithm, SimulationResult, compare, simulate
from disk_sim.logging import LogLevel, SessionLog
from disk_sim.workload import clamp

if TYPE_CHECKING:
    from collections.abc import Iterable


class DiskSimulator:
    """Holds the state of one interactive simulation session."""

    def __init__(
        self,
        *,
        config: SimulationConfig | None = None,
        algorithm: Algorithm = Algorithm.FCFS,
        log: SessionLog | None = None,
    ) -> None:
        """Create a session with an empty request queue.

        Args:
            config: Starting settings (validated); defaults if None.
            algorithm: The algorithm ``run`` uses.
            log: Session log to write to; a fresh one if None.

        """
        self._config = (config or SimulationConfig()).validate()
        self._algorithm = algorithm
        self._log = log if log is not None else SessionLog()
        self._requests: list[int] = []
        self._last_result: SimulationResult | None = None

    @property
    def config(self) -> SimulationConfig:
        """Return the current settings."""
        return self._config

    @property
    def algorithm(self) -> Algorithm:
        """Return the selected algorithm."""
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value: Algorithm) -> None:
        """Select the algorithm used by ``run``."""
        self._algorithm = value
        self._log.log(LogLevel.DEBUG, f"algorithm set to {value}")

    @property
    def log(self) -> SessionLog:
        """Return the session log."""
        return self._log

    @property
    def requests(self) -> list[int]:
        """Return a copy of the current request queue."""
        return list(self._requests)

    @property
    def last_result(self) -> SimulationResult | None:
        """Return the result of the most recent ``run``, if any."""
        return self._last_result

    def configure(self, **changes: Any) -> SimulationConfig:
        """Apply *changes* to the settings and return the new config.

        Shrinking the disk clamps queued requests that now lie beyond its
        last track, so the queue always fits the current disk.

        Raises:
            ConfigError: If the resulting config is invalid; the current
                settings are left untouched.

        """
        self._config = self._config.replace(**changes)
        summary = ", ".join(f"{key}={value}" for key, value in changes.items())
        self._log.log(LogLevel.DEBUG, f"config changed: {summary}")
        if "disk_max" in changes:
            self._clamp_requests()
        return self._config

    def _clamp_requests(self) -> None:
        disk_max = self._config.disk_max
        clamped = [clamp(track, disk_max) for track in self._requests]
        moved = sum(old != new for old, new in zip(self._requests, clamped, strict=True))
        self._requests = clamped
        if moved:
            self._log.log(LogLevel.INFO, f"clamped {moved} request(s) to tracks 0..{disk_max}")

    def set_requests(self, requests: Iterable[int]) -> None:
        """Replace the request queue."""
        self._requests = list(requests)
        self._log.log(LogLevel.INFO, f"loaded {len(self._requests)} request(s)")

    def add_request(self, track: int) -> None:
        """Append one request to the queue."""
        self._requests.append(track)

    def clear(self) -> None:
        """Empty the request queue."""
        self._requests.clear()
        self._log.log(LogLevel.INFO, "request queue cleared")

    def run(self) -> SimulationResult:
        """Simulate the selected algorithm on the current queue."""
        if not self._requests:
            self._log.log(LogLevel.WARNING, "running with an empty workload")
        result = simulate(self._algorithm, self._requests, self._config)
        self._last_result = result
        self._log.record_run(result.algorithm, self._config.head_start, result.metrics)
        return result

    def compare(self) -> list[SimulationResult]:
        """Simulate every algorithm on the current queue.

        Comparisons are logged as one summary line, not as runs.
        """
        results = compare(self._requests, self._config)
        best = min(results, key=lambda r: r.metrics.total_movement)
        self._log.log(
            LogLevel.INFO,
            f"compared {len(results)} algorithms, least movement: {best.algorithm} "
            f"({best.metrics.total_movement})",
        )
        return results
