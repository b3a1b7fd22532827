"""Error taxonomy for querybench.

Every error is fatal: it is raised where the failure happens and only the
CLI catches it, to report and exit non-zero.
"""

from __future__ import annotations

from typing import Any


class QueryBenchError(Exception):
    """Base class for all querybench failures."""


class NetworkError(QueryBenchError):
    """A fixture endpoint was unreachable or answered with an error status."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class ParseError(QueryBenchError):
    """A fixture body could not be decoded as JSON."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GET {url} returned invalid JSON: {reason}")
        self.url = url
        self.reason = reason


class MismatchError(QueryBenchError):
    """The two sides of a transform pair disagree."""

    def __init__(self, name: str, a: Any, b: Any, detail: str = "") -> None:
        message = f"Invalid test '{name}': the benchmarks do not produce the same results"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
        self.name = name
        self.a = a
        self.b = b


class BenchmarkExecutionError(QueryBenchError):
    """A callable raised while it was being timed."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"{name} raised {type(cause).__name__}: {cause}")
        self.name = name


class EmptyAggregateError(QueryBenchError):
    """Aggregates were requested over an empty prize collection."""
