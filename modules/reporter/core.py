"""Reporter module — collects benchmark results for the final summary.

The collection is owned by whoever creates the Reporter and is threaded
through the run explicitly. Nothing is persisted: results live for the
duration of the process and are printed once at the end.

This module depends only on domain/ types and has zero external imports beyond stdlib.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models import BenchmarkResult
    from domain.ports import TablePort

logger = logging.getLogger("querybench.reporter")

HEADERS: list[str] = [
    "Benchmark",
    "Python ops/sec",
    "JSONata ops/sec",
    "Python / JSONata",
    "JSONata % as fast",
    "JSONata % slower",
]


def result_row(result: BenchmarkResult) -> list[str]:
    """Format one result as table cells."""
    return [
        result.name,
        f"{round(result.rate_a):,}",
        f"{round(result.rate_b):,}",
        f"{result.ratio_a_over_b}x",
        f"{result.percent_b_as_fast_as_a}%",
        f"{result.percent_b_slower_than_a}%",
    ]


class Reporter:
    """Ordered, append-only collection of BenchmarkResult."""

    def __init__(self) -> None:
        self._results: list[BenchmarkResult] = []

    def record(self, result: BenchmarkResult) -> None:
        """Append *result* to the collection."""
        self._results.append(result)
        logger.debug("Recorded result for '%s' (%d total)", result.name, len(self._results))

    @property
    def results(self) -> tuple[BenchmarkResult, ...]:
        """All recorded results, in recording order."""
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def rows(self) -> list[list[str]]:
        """Table rows for every recorded result."""
        return [result_row(r) for r in self._results]

    def print_all(self, out: TablePort) -> None:
        """Render every recorded result as a single table on *out*."""
        out.table(HEADERS, self.rows(), title="Results")
