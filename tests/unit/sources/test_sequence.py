"""Tests for SequenceSource."""

import time

import pytest
from pydantic import ValidationError

from thermowatch import SequenceSource

from ..mocks import FixedClockSource


class TestSequenceSource:
    """Test replaying a fixed list."""

    def test_yields_values_in_order(self, seed_values) -> None:
        """Test samples follow the list order."""
        source = SequenceSource(name="seed", values=seed_values)

        assert [s.value for s in source.samples()] == seed_values

    def test_empty(self, empty_source) -> None:
        """Test an empty list yields nothing."""
        assert list(empty_source.samples()) == []

    def test_timestamps_from_clock(self) -> None:
        """Test each sample is stamped by get_time()."""
        source = FixedClockSource(
            name="seq", values=[1, 2, 3], start_ns=100, step_ns=10
        )

        assert [s.timestamp for s in source.samples()] == [100, 110, 120]

    def test_default_clock_is_wall_clock(self) -> None:
        """Test the default timestamps are close to time.time_ns()."""
        before = time.time_ns()
        (sample,) = SequenceSource(name="seq", values=[1]).samples()
        after = time.time_ns()

        assert before <= sample.timestamp <= after

    def test_pauses_between_samples_only(self, monkeypatch) -> None:
        """Test pacing happens between samples, not after the last."""
        pauses = []
        source = SequenceSource(
            name="paced", values=[1, 2, 3], interval_ns=1_000_000_000
        )
        monkeypatch.setattr(
            "thermowatch.base.source.time.sleep", pauses.append
        )

        list(source.samples())

        assert pauses == [1.0, 1.0]

    def test_no_pause_by_default(self, monkeypatch) -> None:
        """Test a zero interval never sleeps."""
        pauses = []
        monkeypatch.setattr(
            "thermowatch.base.source.time.sleep", pauses.append
        )

        list(SequenceSource(name="seq", values=[1, 2]).samples())

        assert pauses == []

    def test_negative_interval_rejected(self) -> None:
        """Test the interval must be non-negative."""
        with pytest.raises(ValidationError):
            SequenceSource(name="seq", interval_ns=-1)

    def test_serialization(self) -> None:
        """Test configuration round-trips through model_dump."""
        source = SequenceSource(name="seq", values=[1.5, 2.5], interval_ns=5)

        recreated = SequenceSource.model_validate(source.model_dump())

        assert recreated.values == [1.5, 2.5]
        assert recreated.interval_ns == 5
        assert recreated.name == "seq"
