"""Core data types for querybench.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# A decoded JSON document: nested dicts/lists of str, int, float, bool, None.
JSONValue = Any


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fixtures:
    """The two datasets fetched at startup."""

    laureates: JSONValue
    prizes: JSONValue


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransformPair:
    """Two independently written transforms expected to produce equal output.

    ``variant_a`` is the hand-written Python side, ``variant_b`` the JSONata
    side. Both are zero-argument callables closed over the fixtures.
    """

    name: str
    variant_a: Callable[[], JSONValue]
    variant_b: Callable[[], JSONValue]


# ---------------------------------------------------------------------------
# Benchmarking
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchmarkSettings:
    """Knobs for the adaptive sampler.

    Attributes:
        min_time: Minimum duration of one sampled cycle, in seconds.
        max_time: Time budget for sampling one callable, in seconds.
        min_samples: Samples to collect before the sampler may stop.
        max_rme: Relative margin of error (percent) at which sampling stops
            early. ``0`` disables early stopping.
        max_loops: Ceiling on invocations per timed cycle.
    """

    min_time: float
    max_time: float
    min_samples: int
    max_rme: float
    max_loops: int


@dataclass(frozen=True)
class SampleStats:
    """Statistics over the per-invocation periods of one measurement."""

    mean: float
    deviation: float
    variance: float
    sem: float
    moe: float
    rme: float
    samples: tuple[float, ...]


@dataclass(frozen=True)
class Measurement:
    """Outcome of sampling a single callable."""

    name: str
    hz: float
    count: int
    cycles: int
    elapsed: float
    stats: SampleStats


@dataclass(frozen=True)
class BenchmarkResult:
    """Comparison of the two sides of a transform pair."""

    name: str
    rate_a: float
    rate_b: float
    ratio_a_over_b: int
    percent_b_as_fast_as_a: int
    percent_b_slower_than_a: int
    fastest: tuple[str, ...] = ()
