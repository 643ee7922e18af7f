"""Dispatcher — choose an algorithm by name and run it.

The six algorithms form a closed set, modelled as the ``Algorithm``
enum.  ``policy_for`` maps each member to its policy class and passes
along only the settings that policy understands:

==========  ==========================================
Algorithm   Settings used
==========  ==========================================
FCFS        (none)
SSTF        (none)
SCAN        direction, disk_max, use_edge
C-SCAN      direction, disk_max, count_jump
LOOK        direction
C-LOOK      direction
==========  ==========================================

Everything else in the config is ignored for that algorithm, not
rejected.  ``compare`` runs all six on the same inputs so their metrics
can be laid side by side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from disk_sim.algorithms import (
    CLOOKPolicy,
    CSCANPolicy,
    DiskPolicy,
    FCFSPolicy,
    LOOKPolicy,
    SCANPolicy,
    SSTFPolicy,
)
from disk_sim.config import ConfigError, SimulationConfig
from disk_sim.metrics import Metrics, compute_metrics

if TYPE_CHECKING:
    from collections.abc import Sequence

    from disk_sim.tracks import Trace


class Algorithm(StrEnum):
    """The supported disk scheduling disciplines."""

    FCFS = "FCFS"
    SSTF = "SSTF"
    SCAN = "SCAN"
    C_SCAN = "C-SCAN"
    LOOK = "LOOK"
    C_LOOK = "C-LOOK"

    @classmethod
    def parse(cls, name: str) -> Algorithm:
        """Look up an algorithm by name, ignoring case (``c_scan`` works too).

        Raises:
            ConfigError: If *name* is not a known algorithm.

        """
        key = name.strip().upper().replace("_", "-")
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm
        known = ", ".join(a.value for a in cls)
        msg = f"unknown algorithm '{name}' (choose from {known})"
        raise ConfigError(msg)


@dataclass(frozen=True)
class SimulationResult:
    """The trace and metrics produced by one algorithm run."""

    algorithm: Algorithm
    trace: Trace
    metrics: Metrics


def policy_for(algorithm: Algorithm, config: SimulationConfig) -> DiskPolicy:
    """Build the policy for *algorithm* from the applicable settings."""
    match algorithm:
        case Algorithm.FCFS:
            return FCFSPolicy()
        case Algorithm.SSTF:
            return SSTFPolicy()
        case Algorithm.SCAN:
            return SCANPolicy(
                direction=config.direction, disk_max=config.disk_max, use_edge=config.use_edge
            )
        case Algorithm.C_SCAN:
            return CSCANPolicy(
                direction=config.direction, disk_max=config.disk_max, count_jump=config.count_jump
            )
        case Algorithm.LOOK:
            return LOOKPolicy(direction=config.direction)
        case Algorithm.C_LOOK:
            return CLOOKPolicy(direction=config.direction)


def simulate(
    algorithm: Algorithm, requests: Sequence[int], config: SimulationConfig
) -> SimulationResult:
    """Run *algorithm* on *requests* starting from ``config.head_start``."""
    trace = policy_for(algorithm, config).simulate(requests, head=config.head_start)
    return SimulationResult(algorithm=algorithm, trace=trace, metrics=compute_metrics(trace))


def compare(requests: Sequence[int], config: SimulationConfig) -> list[SimulationResult]:
    """Run every algorithm on the same workload, in ``Algorithm`` order."""
    return [simulate(algorithm, requests, config) for algorithm in Algorithm]
