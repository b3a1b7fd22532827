"""
wiring.py — Composition root.

Maps each port to its concrete adapter and builds BenchmarkSettings from
kernel.config. The kernel asks this module for collaborators instead of
importing adapters directly, so tests can swap any of them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.models import BenchmarkSettings
from kernel.config import (
    FETCH_TIMEOUT,
    MAX_LOOPS,
    MAX_RME,
    MAX_SAMPLE_TIME,
    MIN_CYCLE_TIME,
    MIN_SAMPLES,
)

if TYPE_CHECKING:
    from domain.ports import FixtureLoaderPort, QueryEnginePort

logger = logging.getLogger("querybench.wiring")


def build_loader(timeout: float = FETCH_TIMEOUT) -> FixtureLoaderPort:
    """Return the HTTP fixture loader."""
    from adapters.http_fixtures import HttpFixtureLoader

    return HttpFixtureLoader(timeout=timeout)


def build_engine() -> QueryEnginePort:
    """Return the JSONata query engine."""
    from adapters.jsonata_engine import JsonataEngine

    return JsonataEngine()


def build_settings(
    *,
    min_time: float | None = None,
    max_time: float | None = None,
    min_samples: int | None = None,
    max_rme: float | None = None,
    max_loops: int | None = None,
) -> BenchmarkSettings:
    """Build the sampler settings from kernel.config, with optional overrides.

    Raises:
        ValueError: If a value is out of range.
    """
    settings = BenchmarkSettings(
        min_time=MIN_CYCLE_TIME if min_time is None else min_time,
        max_time=MAX_SAMPLE_TIME if max_time is None else max_time,
        min_samples=MIN_SAMPLES if min_samples is None else min_samples,
        max_rme=MAX_RME if max_rme is None else max_rme,
        max_loops=MAX_LOOPS if max_loops is None else max_loops,
    )
    if settings.min_time <= 0:
        msg = f"min_time must be positive, got {settings.min_time}"
        raise ValueError(msg)
    if settings.max_time < 0:
        msg = f"max_time must not be negative, got {settings.max_time}"
        raise ValueError(msg)
    if settings.min_samples < 1:
        msg = f"min_samples must be at least 1, got {settings.min_samples}"
        raise ValueError(msg)
    if settings.max_rme < 0:
        msg = f"max_rme must not be negative, got {settings.max_rme}"
        raise ValueError(msg)
    if settings.max_loops < 1:
        msg = f"max_loops must be at least 1, got {settings.max_loops}"
        raise ValueError(msg)
    logger.debug("Benchmark settings: %s", settings)
    return settings
