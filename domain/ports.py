"""Port interfaces for querybench.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.models import JSONValue


class FixtureLoaderPort(Protocol):
    """Abstraction over fetching a JSON fixture."""

    async def load(self, url: str) -> JSONValue:
        """Fetch *url* and return the decoded JSON body.

        Raises NetworkError when the endpoint cannot be reached or answers
        with an error status, ParseError when the body is not JSON.
        """
        ...


class CompiledQueryPort(Protocol):
    """A query expression compiled once and evaluated many times."""

    def evaluate(self, data: JSONValue) -> JSONValue:
        """Evaluate the expression against *data*."""
        ...


class TablePort(Protocol):
    """Anything that can display a table (the console backends do)."""

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...


class QueryEnginePort(Protocol):
    """Abstraction over the declarative query engine."""

    def compile(self, expression: str) -> CompiledQueryPort:
        """Compile *expression* for repeated evaluation."""
        ...
