"""Benchmark runner — adaptive sampling of zero-argument callables on pyperf.

Each callable is measured in isolation:

1. **Calibration** doubles the loops-per-value count, as pyperf does, until
   one timed cycle lasts at least ``min_time`` so clock resolution is
   negligible. Calibration cycles are kept as the run's warmups.
2. **Sampling** repeats timed cycles of that many loops, recording the
   per-invocation period of each, until ``min_samples`` were collected and
   either the relative margin of error fell to ``max_rme`` or ``max_time``
   ran out.
3. **Statistics** come from the ``pyperf.Benchmark`` holding the sampled
   run: mean and standard deviation, then the standard error, the 95%
   margin of error and the relative margin of error. The rate is
   ``1 / mean`` invocations per second.

Values are collected in-process; ``pyperf.Runner`` would spawn worker
processes that re-run the whole program, fixtures fetch included.
"""

from __future__ import annotations

import logging
import math
import statistics
import time
from typing import TYPE_CHECKING

import pyperf

from domain.errors import BenchmarkExecutionError
from domain.models import BenchmarkResult, Measurement, SampleStats

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import BenchmarkSettings

logger = logging.getLogger("querybench.runner")

# Two-sided 95% critical value of the normal distribution.
_Z95 = statistics.NormalDist().inv_cdf(0.975)


def compute_stats(bench: pyperf.Benchmark) -> SampleStats:
    """Summarize the per-invocation periods (seconds) of a pyperf benchmark."""
    values = bench.get_values()
    n = len(values)
    mean = bench.mean()
    deviation = bench.stdev() if n > 1 else 0.0
    sem = deviation / math.sqrt(n)
    moe = sem * _Z95
    return SampleStats(
        mean=mean,
        deviation=deviation,
        variance=deviation**2,
        sem=sem,
        moe=moe,
        rme=moe / mean * 100,
        samples=tuple(values),
    )


def format_measurement(m: Measurement) -> str:
    """Render a measurement as ``name x 1,234 ops/sec ±0.52% (91 runs sampled)``."""
    decimals = 2 if m.hz < 100 else 0
    size = len(m.stats.samples)
    runs = "run" if size == 1 else "runs"
    return f"{m.name} x {m.hz:,.{decimals}f} ops/sec ±{m.stats.rme:.2f}% ({size} {runs} sampled)"


def _intervals_overlap(a: Measurement, b: Measurement) -> bool:
    lo_a, hi_a = a.stats.mean - a.stats.moe, a.stats.mean + a.stats.moe
    lo_b, hi_b = b.stats.mean - b.stats.moe, b.stats.mean + b.stats.moe
    return lo_a <= hi_b and lo_b <= hi_a


def fastest(a: Measurement, b: Measurement) -> tuple[str, ...]:
    """Names of the fastest measurement(s).

    The slower side is included too when the two confidence intervals
    overlap, i.e. the difference is not statistically significant.
    """
    best, other = sorted((a, b), key=lambda m: m.stats.mean + m.stats.moe)
    if _intervals_overlap(best, other):
        return (best.name, other.name)
    return (best.name,)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def summarize(
    name: str,
    a: Measurement,
    b: Measurement,
) -> BenchmarkResult:
    """Build the comparison record for the two sides of a pair."""
    return BenchmarkResult(
        name=name,
        rate_a=a.hz,
        rate_b=b.hz,
        ratio_a_over_b=_round_half_up(a.hz / b.hz),
        percent_b_as_fast_as_a=_round_half_up(b.hz / a.hz * 100),
        percent_b_slower_than_a=_round_half_up((1 - b.hz / a.hz) * 100),
        fastest=fastest(a, b),
    )


def _benchmark(
    name: str,
    values: list[float],
    warmups: list[tuple[int, float]],
    loops: int,
) -> pyperf.Benchmark:
    run = pyperf.Run(
        values,
        warmups=warmups,
        metadata={"name": name, "loops": loops, "unit": "second"},
        collect_metadata=False,
    )
    return pyperf.Benchmark([run])


class Runner:
    """Measures callables and compares them pairwise.

    Parameters
    ----------
    settings:
        Sampler knobs (cycle time, time budget, sample floor, rme target,
        loops ceiling).
    clock:
        Monotonic clock returning seconds. Tests inject a fake one.
    on_cycle:
        Called with each finished Measurement, in measurement order.

    """

    def __init__(
        self,
        settings: BenchmarkSettings,
        *,
        clock: Callable[[], float] = time.perf_counter,
        on_cycle: Callable[[Measurement], None] | None = None,
    ) -> None:
        self.settings = settings
        self._clock = clock
        self._on_cycle = on_cycle

    def _cycle(self, name: str, fn: Callable[[], object], loops: int) -> float:
        """Invoke *fn* *loops* times and return the elapsed seconds."""
        start = self._clock()
        try:
            for _ in range(loops):
                fn()
        except Exception as exc:
            logger.error("%s raised during timing: %s", name, exc)
            raise BenchmarkExecutionError(name, exc) from exc
        return self._clock() - start

    def _calibrate(
        self, name: str, fn: Callable[[], object]
    ) -> tuple[int, list[tuple[int, float]]]:
        """Double the loop count until one cycle lasts at least ``min_time``."""
        settings = self.settings
        loops = 1
        warmups: list[tuple[int, float]] = []
        while True:
            elapsed = self._cycle(name, fn, loops)
            warmups.append((loops, max(elapsed, 0.0) / loops))
            if elapsed >= settings.min_time or loops >= settings.max_loops:
                logger.debug("%s: calibrated to %d loops (%.4fs)", name, loops, elapsed)
                return loops, warmups
            loops = min(loops * 2, settings.max_loops)

    def measure(self, name: str, fn: Callable[[], object]) -> Measurement:
        """Calibrate, then sample *fn* until its timing is stable."""
        settings = self.settings
        loops, warmups = self._calibrate(name, fn)

        values: list[float] = []
        started = self._clock()
        while True:
            elapsed = self._cycle(name, fn, loops)
            if elapsed <= 0:
                msg = "cycle time below clock resolution"
                raise BenchmarkExecutionError(name, ArithmeticError(msg))
            values.append(elapsed / loops)
            if len(values) < settings.min_samples:
                continue
            if settings.max_rme:
                rme = compute_stats(_benchmark(name, values, warmups, loops)).rme
                if rme <= settings.max_rme:
                    break
            if self._clock() - started >= settings.max_time:
                break

        total = self._clock() - started
        stats = compute_stats(_benchmark(name, values, warmups, loops))
        hz = 1 / stats.mean
        measurement = Measurement(
            name=name,
            hz=hz,
            count=loops,
            cycles=len(values),
            elapsed=total,
            stats=stats,
        )
        logger.info("%s: %.1f ops/sec (rme %.2f%%, %d samples)", name, hz, stats.rme, len(values))
        if self._on_cycle is not None:
            self._on_cycle(measurement)
        return measurement

    def compare(
        self,
        name: str,
        fn_a: Callable[[], object],
        fn_b: Callable[[], object],
    ) -> BenchmarkResult:
        """Measure *fn_a*, then *fn_b*, and summarize the two rates."""
        a = self.measure(f"{name} benchmark 1", fn_a)
        b = self.measure(f"{name} benchmark 2", fn_b)
        return summarize(name, a, b)
