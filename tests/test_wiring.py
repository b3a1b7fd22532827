"""Tests for wiring.py — adapter selection and settings validation."""

from __future__ import annotations

import pytest

import wiring
from adapters.http_fixtures import HttpFixtureLoader
from adapters.jsonata_engine import JsonataEngine
from kernel.config import MAX_LOOPS, MAX_RME, MAX_SAMPLE_TIME, MIN_CYCLE_TIME, MIN_SAMPLES


class TestAdapters:
    """Each port maps to its concrete adapter."""

    def test_build_loader(self) -> None:
        loader = wiring.build_loader(timeout=3.0)
        assert isinstance(loader, HttpFixtureLoader)
        assert loader._timeout == 3.0

    def test_build_engine(self) -> None:
        assert isinstance(wiring.build_engine(), JsonataEngine)


class TestSettings:
    """Settings come from kernel.config; overrides replace single fields."""

    def test_defaults_come_from_config(self) -> None:
        s = wiring.build_settings()
        assert s.min_time == MIN_CYCLE_TIME
        assert s.max_time == MAX_SAMPLE_TIME
        assert s.min_samples == MIN_SAMPLES
        assert s.max_rme == MAX_RME
        assert s.max_loops == MAX_LOOPS

    def test_overrides_apply_individually(self) -> None:
        s = wiring.build_settings(max_time=1.5, max_rme=2.0)
        assert s.max_time == 1.5
        assert s.max_rme == 2.0
        assert s.min_time == MIN_CYCLE_TIME
        assert s.min_samples == MIN_SAMPLES

    def test_zero_budget_is_allowed(self) -> None:
        assert wiring.build_settings(max_time=0.0).max_time == 0.0

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"min_time": 0.0}, "min_time"),
            ({"min_time": -1.0}, "min_time"),
            ({"max_time": -0.1}, "max_time"),
            ({"min_samples": 0}, "min_samples"),
            ({"max_rme": -5.0}, "max_rme"),
            ({"max_loops": 0}, "max_loops"),
        ],
    )
    def test_out_of_range_rejected(self, overrides: dict[str, float], field: str) -> None:
        with pytest.raises(ValueError, match=field):
            wiring.build_settings(**overrides)  # type: ignore[arg-type]
