"""Transform pairs — binds each imperative transform and its JSONata twin
to the loaded fixtures.

Expressions are compiled once here; the returned callables only evaluate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from domain.models import TransformPair
from modules.transforms import imperative, queries

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import Fixtures, JSONValue
    from domain.ports import QueryEnginePort

logger = logging.getLogger("querybench.transforms")

# (name, imperative function, expression, fixture selector), in run order.
# The join runs twice: once before and once after the sorted mapping.
_PAIR_TABLE: tuple[tuple[str, Callable[[Any], Any], str, str], ...] = (
    ("simple mapping", imperative.simple_mapping, queries.SIMPLE_MAPPING, "laureates"),
    ("complex mapping", imperative.complex_mapping, queries.COMPLEX_MAPPING, "laureates"),
    ("complex join", imperative.complex_join, queries.COMPLEX_JOIN, "both"),
    (
        "complex mapping with sort",
        imperative.complex_mapping_with_sort,
        queries.COMPLEX_MAPPING_WITH_SORT,
        "laureates",
    ),
    ("complex join", imperative.complex_join, queries.COMPLEX_JOIN, "both"),
    ("aggregates", imperative.aggregates, queries.AGGREGATES, "prizes"),
)


def _select(fixtures: Fixtures, which: str) -> JSONValue:
    if which == "laureates":
        return fixtures.laureates
    if which == "prizes":
        return fixtures.prizes
    return {"laureates": fixtures.laureates, "prizes": fixtures.prizes}


def _bind(fn: Callable[[Any], Any], data: JSONValue) -> Callable[[], JSONValue]:
    return lambda: fn(data)


def build_pairs(fixtures: Fixtures, engine: QueryEnginePort) -> list[TransformPair]:
    """Return the transform pairs over *fixtures*, in the order they run."""
    compiled: dict[str, Any] = {}
    pairs: list[TransformPair] = []
    for name, fn, expression, which in _PAIR_TABLE:
        if expression not in compiled:
            compiled[expression] = engine.compile(expression)
        data = _select(fixtures, which)
        pairs.append(
            TransformPair(
                name=name,
                variant_a=_bind(fn, data),
                variant_b=_bind(compiled[expression].evaluate, data),
            )
        )
    logger.debug("Built %d transform pairs (%d expressions)", len(pairs), len(compiled))
    return pairs
