"""Simulation configuration — the knobs that shape a scheduling run.

A ``SimulationConfig`` carries everything besides the workload itself:
disk size, starting head position, sweep direction, and the two
boundary flags (SCAN's edge visit, C-SCAN's jump accounting).  Not every
algorithm reads every field; the dispatcher hands each policy only the
settings that apply to it.

The scheduling core trusts its inputs.  This module is where they are
checked: ``validate`` rejects a configuration the core could not
meaningfully simulate, and ``from_mapping`` builds one from loosely
typed data such as a JSON request body.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from disk_sim.tracks import Direction, in_range

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_DISK_MAX = 199
DEFAULT_HEAD_START = 50


class ConfigError(Exception):
    """Raise when a simulation configuration is invalid."""


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for one simulation run.

    Attributes:
        disk_max: Highest track number (tracks are ``0 .. disk_max``).
        head_start: Track under the head when the run begins.
        direction: Initial sweep direction (SCAN, C-SCAN, LOOK, C-LOOK).
        use_edge: SCAN visits the disk edge before reversing.
        count_jump: C-SCAN charges its wraparound jump as movement.

    """

    disk_max: int = DEFAULT_DISK_MAX
    head_start: int = DEFAULT_HEAD_START
    direction: Direction = Direction.UP
    use_edge: bool = True
    count_jump: bool = False

    def validate(self) -> SimulationConfig:
        """Check the configuration and return it unchanged.

        Raises:
            ConfigError: If ``disk_max`` is negative or the head lies
                outside the track domain.

        """
        if self.disk_max < 0:
            msg = f"disk_max must be non-negative (got {self.disk_max})"
            raise ConfigError(msg)
        if not in_range(self.head_start, 0, self.disk_max):
            msg = f"head_start {self.head_start} is outside tracks 0..{self.disk_max}"
            raise ConfigError(msg)
        return self

    def replace(self, **changes: Any) -> SimulationConfig:
        """Return a validated copy with *changes* applied."""
        if "direction" in changes:
            changes["direction"] = _parse_direction(changes["direction"])
        return dataclasses.replace(self, **changes).validate()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SimulationConfig:
        """Build a validated config from a JSON-like mapping.

        Missing keys take their defaults; unknown keys are ignored.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.

        """
        defaults = cls()
        config = cls(
            disk_max=_int_field(data, "disk_max", defaults.disk_max),
            head_start=_int_field(data, "head_start", defaults.head_start),
            direction=_parse_direction(data.get("direction", defaults.direction)),
            use_edge=_bool_field(data, "use_edge", default=defaults.use_edge),
            count_jump=_bool_field(data, "count_jump", default=defaults.count_jump),
        )
        return config.validate()


def _parse_direction(value: object) -> Direction:
    """Coerce *value* to a ``Direction``."""
    if isinstance(value, str) and value.strip().lower() in {d.value for d in Direction}:
        return Direction(value.strip().lower())
    msg = f"direction must be 'up' or 'down' (got {value!r})"
    raise ConfigError(msg)


def _int_field(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    # bool is an int subclass, but True is not a track number.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{key} must be an integer (got {value!r})"
        raise ConfigError(msg)
    return value


def _bool_field(data: Mapping[str, Any], key: str, *, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        msg = f"{key} must be true or false (got {value!r})"
        raise ConfigError(msg)
    return value
