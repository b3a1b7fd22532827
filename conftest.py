"""Shared pytest fixtures and test doubles for querybench.

Provides:
- Small laureates/prizes documents shaped like the Nobel Prize API v2
- Fake port implementations (FixtureLoader, QueryEngine, Console)
- Deterministic clocks for the benchmark runner
- Factory fixtures for domain models with sensible defaults
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

import pytest

from domain.errors import NetworkError
from domain.models import BenchmarkResult, Fixtures, Measurement, SampleStats
from modules.transforms import imperative, queries

if TYPE_CHECKING:
    from collections.abc import Callable

# ── Sample documents ──────────────────────────────────────────────────────

_ECONOMICS = "The Sveriges Riksbank Prize in Economic Sciences in Memory of Alfred Nobel"
_PEACE = "The Nobel Peace Prize"
_MEDICINE = "The Nobel Prize in Physiology or Medicine"

LAUREATES: dict[str, Any] = {
    "laureates": [
        {
            "id": "745",
            "knownName": {"en": "A. Michael Spence"},
            "gender": "male",
            "nobelPrizes": [{"awardYear": "2001", "categoryFullName": {"en": _ECONOMICS}}],
        },
        {
            "id": "779",
            "knownName": {"en": "Richard Axel"},
            "gender": "male",
            "nobelPrizes": [{"awardYear": "2004", "categoryFullName": {"en": _MEDICINE}}],
        },
        {
            "id": "537",
            "orgName": {"en": "United Nations"},
            "nobelPrizes": [{"awardYear": "2001", "categoryFullName": {"en": _PEACE}}],
        },
        {
            "id": "780",
            "knownName": {"en": "Linda B. Buck"},
            "gender": "female",
            "nobelPrizes": [{"awardYear": "2004", "categoryFullName": {"en": _MEDICINE}}],
        },
        {
            "id": "746",
            "knownName": {"en": "Joseph E. Stiglitz"},
            "gender": "male",
            "nobelPrizes": [{"awardYear": "2001", "categoryFullName": {"en": _ECONOMICS}}],
        },
    ],
}

PRIZES: dict[str, Any] = {
    "nobelPrizes": [
        {
            "awardYear": "2001",
            "categoryFullName": {"en": _ECONOMICS},
            "laureates": [{"id": "745"}, {"id": "746"}],
        },
        {
            "awardYear": "2001",
            "categoryFullName": {"en": _PEACE},
            "laureates": [{"id": "537"}],
        },
        {
            "awardYear": "2004",
            "categoryFullName": {"en": _MEDICINE},
            "laureates": [{"id": "779"}, {"id": "780"}],
        },
    ],
}


@pytest.fixture()
def laureates() -> dict[str, Any]:
    """A fresh copy of the sample laureates document."""
    return copy.deepcopy(LAUREATES)


@pytest.fixture()
def prizes() -> dict[str, Any]:
    """A fresh copy of the sample prizes document."""
    return copy.deepcopy(PRIZES)


@pytest.fixture()
def fixtures(laureates: dict[str, Any], prizes: dict[str, Any]) -> Fixtures:
    """Both sample documents bundled as Fixtures."""
    return Fixtures(laureates=laureates, prizes=prizes)


# ── Fake Port Implementations ─────────────────────────────────────────────


class FakeLoader:
    """In-memory FixtureLoaderPort.

    Serves documents by URL and records the order of requests. A URL mapped
    to an exception instance raises it instead.
    """

    def __init__(self, documents: dict[str, Any]) -> None:
        self._documents = documents
        self.requested: list[str] = []

    async def load(self, url: str) -> Any:
        """Return the document registered for *url*."""
        self.requested.append(url)
        if url not in self._documents:
            raise NetworkError(url, "no such fixture")
        doc = self._documents[url]
        if isinstance(doc, Exception):
            raise doc
        return doc


class FakeQuery:
    """Compiled query that delegates to a Python function."""

    def __init__(self, expression: str, fn: Callable[[Any], Any]) -> None:
        self.expression = expression
        self._fn = fn
        self.calls = 0

    def evaluate(self, data: Any) -> Any:
        """Apply the delegate to *data*."""
        self.calls += 1
        return self._fn(data)


class FakeEngine:
    """QueryEnginePort that maps each known expression to its Python twin.

    ``overrides`` replaces the behaviour of individual expressions, e.g. to
    force a mismatch.
    """

    def __init__(self, overrides: dict[str, Callable[[Any], Any]] | None = None) -> None:
        self._impls: dict[str, Callable[[Any], Any]] = {
            queries.SIMPLE_MAPPING: imperative.simple_mapping,
            queries.COMPLEX_MAPPING: imperative.complex_mapping,
            queries.COMPLEX_MAPPING_WITH_SORT: imperative.complex_mapping_with_sort,
            queries.COMPLEX_JOIN: imperative.complex_join,
            queries.AGGREGATES: imperative.aggregates,
        }
        self._impls.update(overrides or {})
        self.compiled: list[FakeQuery] = []

    def compile(self, expression: str) -> FakeQuery:
        """Return a FakeQuery for a known expression."""
        query = FakeQuery(expression, self._impls[expression])
        self.compiled.append(query)
        return query


class RecordingConsole:
    """ConsoleProtocol that records every call as ``(method, args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))

    def info(self, message: str) -> None:
        self._record("info", message)

    def success(self, message: str) -> None:
        self._record("success", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        self._record("panel", content, title)

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        self._record("table", headers, rows, title)

    def pretty(self, value: Any, *, depth: int, title: str = "") -> None:
        self._record("pretty", value, depth, title)

    def step(self, current: int, total: int, description: str) -> None:
        self._record("step", current, total, description)

    def step_detail(self, message: str) -> None:
        self._record("step_detail", message)

    def messages(self, method: str) -> list[tuple[Any, ...]]:
        """Arguments of every call to *method*."""
        return [args for name, args in self.calls if name == method]


@pytest.fixture()
def fake_engine() -> FakeEngine:
    """A FakeEngine whose queries agree with the imperative transforms."""
    return FakeEngine()


@pytest.fixture()
def make_engine() -> Callable[..., FakeEngine]:
    """Factory for FakeEngine with per-expression overrides."""

    def _factory(overrides: dict[str, Callable[[Any], Any]] | None = None) -> FakeEngine:
        return FakeEngine(overrides)

    return _factory


@pytest.fixture()
def make_loader() -> Callable[[dict[str, Any]], FakeLoader]:
    """Factory for FakeLoader serving the given URL -> document map."""

    def _factory(documents: dict[str, Any]) -> FakeLoader:
        return FakeLoader(documents)

    return _factory


@pytest.fixture()
def recording_console() -> RecordingConsole:
    """A console that records calls instead of printing."""
    return RecordingConsole()


# ── Clocks ────────────────────────────────────────────────────────────────


class FakeClock:
    """Manually advanced clock; only ``advance`` moves time."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TickClock:
    """Clock that moves forward by ``step`` seconds on every read."""

    def __init__(self, step: float = 0.01) -> None:
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        self.now += self.step
        return self.now


@pytest.fixture()
def fake_clock() -> FakeClock:
    """A clock that only moves when the code under test advances it."""
    return FakeClock()


@pytest.fixture()
def tick_clock() -> TickClock:
    """A clock where every timed cycle appears to last 10ms."""
    return TickClock()


# ── Domain model factories ────────────────────────────────────────────────


@pytest.fixture()
def make_measurement() -> Callable[..., Measurement]:
    """Factory for Measurement with sensible defaults."""

    def _factory(
        *,
        name: str = "bench",
        hz: float = 1000.0,
        rme: float = 0.5,
        samples: int = 10,
        moe: float = 0.0,
    ) -> Measurement:
        mean = 1 / hz
        return Measurement(
            name=name,
            hz=hz,
            count=100,
            cycles=samples,
            elapsed=1.0,
            stats=SampleStats(
                mean=mean,
                deviation=0.0,
                variance=0.0,
                sem=0.0,
                moe=moe,
                rme=rme,
                samples=(mean,) * samples,
            ),
        )

    return _factory


@pytest.fixture()
def make_result() -> Callable[..., BenchmarkResult]:
    """Factory for BenchmarkResult with sensible defaults."""

    def _factory(
        *,
        name: str = "simple mapping",
        rate_a: float = 40000.0,
        rate_b: float = 10000.0,
    ) -> BenchmarkResult:
        return BenchmarkResult(
            name=name,
            rate_a=rate_a,
            rate_b=rate_b,
            ratio_a_over_b=round(rate_a / rate_b),
            percent_b_as_fast_as_a=round(rate_b / rate_a * 100),
            percent_b_slower_than_a=round((1 - rate_b / rate_a) * 100),
            fastest=(f"{name} benchmark 1",),
        )

    return _factory
