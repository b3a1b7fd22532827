"""Equivalence checker — proves both sides of a transform pair agree before
either is timed.

Outputs are normalized through a JSON round trip first: the query engine may
hand back its own sequence/mapping types, and only the JSON-visible content
counts. Equality is strict: sequences are order-sensitive, mappings compare
key sets and values, and booleans, numbers and strings never coerce into
each other.
"""

from __future__ import annotations

import json
import logging
import pprint
from collections.abc import Mapping
from typing import Any

from domain.errors import MismatchError

logger = logging.getLogger("querybench.equivalence")

# Nesting depth shown for each side when a mismatch is reported
_DUMP_DEPTH = 8


def normalize(value: Any) -> Any:
    """Round-trip *value* through JSON, keeping only plain JSON content."""
    return json.loads(json.dumps(value, default=_to_builtin))


def _to_builtin(o: object) -> object:
    """Serialize engine-specific containers as plain dicts and lists."""
    if isinstance(o, Mapping):
        return dict(o)
    try:
        return list(o)  # type: ignore[call-overload]
    except TypeError:
        msg = f"Object of type {type(o).__name__} is not JSON serializable"
        raise TypeError(msg) from None


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality over normalized JSON values."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, int | float) and isinstance(b, int | float):
        return a == b
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))
    if type(a) is not type(b):
        return False
    return bool(a == b)


def render(value: Any, depth: int = _DUMP_DEPTH) -> str:
    """Pretty-print *value*, eliding anything nested deeper than *depth*."""
    return pprint.pformat(value, depth=depth, sort_dicts=False)


def assert_equivalent(name: str, a: Any, b: Any, *, depth: int = _DUMP_DEPTH) -> Any:
    """Raise MismatchError unless *a* and *b* normalize to equal values.

    Returns:
        The normalized value shared by both sides.
    """
    left = normalize(a)
    right = normalize(b)
    if deep_equal(left, right):
        logger.debug("'%s': outputs match", name)
        return left

    logger.error("'%s': outputs differ", name)
    detail = (
        f"{name} benchmark 1 output:\n{render(left, depth)}\n"
        f"{name} benchmark 2 output:\n{render(right, depth)}"
    )
    raise MismatchError(name, left, right, detail)
