"""Tests for simulation configuration."""

import pytest

from disk_sim.config import (
    DEFAULT_DISK_MAX,
    DEFAULT_HEAD_START,
    ConfigError,
    SimulationConfig,
)
from disk_sim.tracks import Direction


class TestDefaults:
    """Verify default settings."""

    def test_defaults(self) -> None:
        """A 200-track disk with the head at 50, sweeping up."""
        config = SimulationConfig()
        assert config.disk_max == DEFAULT_DISK_MAX
        assert config.head_start == DEFAULT_HEAD_START
        assert config.direction is Direction.UP
        assert config.use_edge is True
        assert config.count_jump is False


class TestValidate:
    """Verify range checks."""

    def test_negative_disk_max(self) -> None:
        """A disk needs at least one track."""
        with pytest.raises(ConfigError, match="non-negative"):
            SimulationConfig(disk_max=-1, head_start=0).validate()

    def test_head_outside_disk(self) -> None:
        """The head must sit on a real track."""
        with pytest.raises(ConfigError, match="outside"):
            SimulationConfig(head_start=250).validate()

    def test_single_track_disk(self) -> None:
        """disk_max=0 is a valid (tiny) disk."""
        config = SimulationConfig(disk_max=0, head_start=0)
        assert config.validate() is config


class TestReplace:
    """Verify validated copies."""

    def test_replace_returns_new_config(self) -> None:
        """The original config is unchanged."""
        config = SimulationConfig()
        changed = config.replace(head_start=10, direction="down")
        assert changed.head_start == 10
        assert changed.direction is Direction.DOWN
        assert config.head_start == DEFAULT_HEAD_START

    def test_replace_validates(self) -> None:
        """Shrinking the disk below the head is rejected."""
        with pytest.raises(ConfigError):
            SimulationConfig().replace(disk_max=20)


class TestFromMapping:
    """Verify construction from JSON-like data."""

    def test_empty_mapping_gives_defaults(self) -> None:
        """Missing keys take their defaults."""
        assert SimulationConfig.from_mapping({}) == SimulationConfig()

    def test_full_mapping(self) -> None:
        """All keys are read and coerced."""
        config = SimulationConfig.from_mapping(
            {
                "disk_max": 499,
                "head_start": 300,
                "direction": "DOWN",
                "use_edge": False,
                "count_jump": True,
                "ignored": "yes",
            }
        )
        assert config == SimulationConfig(
            disk_max=499,
            head_start=300,
            direction=Direction.DOWN,
            use_edge=False,
            count_jump=True,
        )

    @pytest.mark.parametrize(
        "data",
        [
            {"disk_max": "199"},
            {"head_start": True},
            {"direction": "sideways"},
            {"direction": 1},
            {"use_edge": "yes"},
            {"head_start": -3},
        ],
    )
    def test_invalid_values(self, data: dict[str, object]) -> None:
        """Wrong types and out-of-range values raise ConfigError."""
        with pytest.raises(ConfigError):
            SimulationConfig.from_mapping(data)
