"""
kernel/loop.py — Fixed run sequence.

One run is strictly sequential:

  1. load the laureates fixture, then the prizes fixture
  2. print a sample of each
  3. for every transform pair, in order:
       assert_equivalent -> Runner.compare -> Reporter.record
  4. print the collected results

Any error aborts the run; the partially filled reporter is never printed.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from adapters.http_fixtures import load_fixtures
from domain.errors import BenchmarkExecutionError, QueryBenchError
from kernel.config import (
    LAUREATES_URL,
    MISMATCH_DEPTH,
    PRIZES_URL,
    SAMPLE_DEPTH,
)
from kernel.console import console as default_console
from modules.equivalence.core import assert_equivalent
from modules.reporter.core import Reporter
from modules.runner.core import Runner, format_measurement
from modules.transforms.core import build_pairs

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import BenchmarkResult, BenchmarkSettings, Fixtures, TransformPair
    from domain.ports import FixtureLoaderPort, QueryEnginePort
    from kernel.console._protocol import ConsoleProtocol

logger = logging.getLogger("querybench")


def _first(document: object, key: str) -> object:
    """Return ``document[key][0]`` when present, else the document itself."""
    if isinstance(document, dict):
        items = document.get(key)
        if isinstance(items, list) and items:
            return items[0]
    return document


def show_samples(fixtures: Fixtures, out: ConsoleProtocol) -> None:
    """Print the first laureate and the first prize."""
    out.pretty(_first(fixtures.laureates, "laureates"), depth=SAMPLE_DEPTH, title="First laureate")
    out.pretty(_first(fixtures.prizes, "nobelPrizes"), depth=SAMPLE_DEPTH, title="First prize")


def _evaluate(name: str, fn: Callable[[], object]) -> object:
    """Call one variant for the equivalence check."""
    try:
        return fn()
    except QueryBenchError:
        raise
    except Exception as exc:
        logger.error("%s raised before timing: %s", name, exc)
        raise BenchmarkExecutionError(name, exc) from exc


def run_pair(
    pair: TransformPair,
    runner: Runner,
    reporter: Reporter,
    out: ConsoleProtocol,
) -> BenchmarkResult:
    """Check one pair for equivalence, benchmark it, and record the result.

    Nothing is timed unless both variants agree.
    """
    output_a = _evaluate(f"{pair.name} benchmark 1", pair.variant_a)
    output_b = _evaluate(f"{pair.name} benchmark 2", pair.variant_b)
    normalized = assert_equivalent(pair.name, output_a, output_b, depth=MISMATCH_DEPTH)
    size = len(normalized) if isinstance(normalized, list | dict) else 1
    out.step_detail(f"outputs match ({size} items)")

    result = runner.compare(pair.name, pair.variant_a, pair.variant_b)
    out.success(f"Fastest is {', '.join(result.fastest)}")
    reporter.record(result)
    return result


def run_pairs(
    pairs: list[TransformPair],
    runner: Runner,
    reporter: Reporter,
    out: ConsoleProtocol,
) -> Reporter:
    """Run every pair in order, one at a time."""
    for i, pair in enumerate(pairs, 1):
        out.step(i, len(pairs), pair.name)
        logger.info("Running pair %d/%d: %s", i, len(pairs), pair.name)
        run_pair(pair, runner, reporter, out)
    return reporter


async def run(
    loader: FixtureLoaderPort,
    engine: QueryEnginePort,
    *,
    settings: BenchmarkSettings | None = None,
    reporter: Reporter | None = None,
    runner: Runner | None = None,
    out: ConsoleProtocol | None = None,
    laureates_url: str = LAUREATES_URL,
    prizes_url: str = PRIZES_URL,
) -> Reporter:
    """Execute one full benchmark run and print the results table.

    Returns:
        The reporter holding every recorded result.
    """
    out = out or default_console
    reporter = reporter if reporter is not None else Reporter()
    if runner is None:
        if settings is None:
            import wiring

            settings = wiring.build_settings()
        runner = Runner(settings, on_cycle=lambda m: out.info(format_measurement(m)))
    started = time.monotonic()

    out.info("Fetching fixtures...")
    fixtures = await load_fixtures(loader, laureates_url, prizes_url)
    show_samples(fixtures, out)

    pairs = build_pairs(fixtures, engine)
    run_pairs(pairs, runner, reporter, out)

    reporter.print_all(out)
    logger.info("Run finished in %.1fs (%d results)", time.monotonic() - started, len(reporter))
    return reporter
