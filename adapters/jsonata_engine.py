"""JSONata adapter implementing QueryEnginePort.

Wraps jsonatapy: expressions are compiled once and the compiled object is
evaluated repeatedly by the benchmark runner.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jsonatapy

if TYPE_CHECKING:
    from domain.models import JSONValue

logger = logging.getLogger("querybench.jsonata")


class JsonataQuery:
    """A compiled JSONata expression."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._compiled = jsonatapy.compile(expression)

    def evaluate(self, data: JSONValue) -> JSONValue:
        """Evaluate the expression against *data*."""
        return self._compiled.evaluate(data)

    def __repr__(self) -> str:
        return f"JsonataQuery({self.expression.strip()!r})"


class JsonataEngine:
    """Concrete QueryEnginePort backed by jsonatapy."""

    def compile(self, expression: str) -> JsonataQuery:
        """Compile *expression* for repeated evaluation."""
        logger.debug("Compiling JSONata expression: %s", " ".join(expression.split()))
        return JsonataQuery(expression)
