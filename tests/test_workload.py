"""Tests for workload parsing and generation."""

import random

import pytest

from disk_sim.workload import (
    SAMPLE_WORKLOAD,
    WorkloadError,
    clamp,
    parse_csv,
    parse_requests,
    random_workload,
)

_DISK_MAX = 199


class TestParseRequests:
    """Verify free-text parsing."""

    def test_commas_and_spaces(self) -> None:
        """Commas, spaces and newlines all separate requests."""
        assert parse_requests("95,180, 34\n119  11", _DISK_MAX) == [95, 180, 34, 119, 11]

    def test_empty_text(self) -> None:
        """Blank input is an empty workload."""
        assert parse_requests("  ", _DISK_MAX) == []

    def test_trailing_separator(self) -> None:
        """Empty tokens are skipped."""
        assert parse_requests("1,2,,3,", _DISK_MAX) == [1, 2, 3]

    def test_out_of_range_clamped(self) -> None:
        """Tracks beyond the disk are pulled to the nearest edge."""
        assert parse_requests("250 -5", _DISK_MAX) == [_DISK_MAX, 0]

    def test_duplicates_preserved(self) -> None:
        """Duplicate tracks are distinct requests."""
        assert parse_requests("50 50", _DISK_MAX) == [50, 50]

    def test_non_numeric_rejected(self) -> None:
        """Anything but an integer raises WorkloadError."""
        with pytest.raises(WorkloadError, match="abc"):
            parse_requests("12, abc", _DISK_MAX)

    def test_sample_round_trip(self) -> None:
        """The sample workload parses from its own text form."""
        text = ",".join(str(t) for t in SAMPLE_WORKLOAD)
        assert tuple(parse_requests(text, _DISK_MAX)) == SAMPLE_WORKLOAD


class TestParseCsv:
    """Verify CSV import."""

    def test_row_major_and_header_skipped(self) -> None:
        """Numeric cells are read row by row; text cells are skipped."""
        text = "track,note\n95,first\n180, 34\n"
        assert parse_csv(text) == [95, 180, 34]

    def test_empty(self) -> None:
        """An empty document has no requests."""
        assert parse_csv("") == []

    def test_decimal_cells_truncated(self) -> None:
        """Decimal cells are kept, truncated toward zero."""
        assert parse_csv("12.5,7\n-3.9,40.\n") == [12, 7, -3, 40]

    def test_non_numbers_skipped(self) -> None:
        """Dots alone and exponents are not track numbers."""
        assert parse_csv(".,1e3,5\n") == [5]


class TestRandomWorkload:
    """Verify random generation."""

    def test_count_and_range(self) -> None:
        """The requested number of in-range tracks is produced."""
        count = 20
        tracks = random_workload(count, _DISK_MAX)
        assert len(tracks) == count
        assert all(0 <= t <= _DISK_MAX for t in tracks)

    def test_seeded_is_reproducible(self) -> None:
        """The same seed yields the same workload."""
        first = random_workload(10, _DISK_MAX, rng=random.Random(7))
        second = random_workload(10, _DISK_MAX, rng=random.Random(7))
        assert first == second

    def test_negative_count(self) -> None:
        """A negative count is rejected."""
        with pytest.raises(WorkloadError):
            random_workload(-1, _DISK_MAX)


class TestClamp:
    """Verify clamping."""

    def test_clamp(self) -> None:
        """Values are pulled into 0..disk_max."""
        assert clamp(-1, _DISK_MAX) == 0
        assert clamp(100, _DISK_MAX) == 100
        assert clamp(500, _DISK_MAX) == _DISK_MAX
