"""Hand-written Python transforms over the Nobel Prize fixtures.

Each function mirrors one JSONata expression in ``queries.py``. Absent
optional fields are left out of the produced objects, which is how JSONata
renders an undefined value.
"""

from __future__ import annotations

from typing import Any

from domain.errors import EmptyAggregateError


def _en(obj: dict[str, Any] | None, key: str) -> Any:
    """Return ``obj[key]["en"]`` or None when any step is missing."""
    if not obj:
        return None
    localized = obj.get(key)
    if not isinstance(localized, dict):
        return None
    return localized.get("en")


def _compact(**fields: Any) -> dict[str, Any]:
    """Build a dict, dropping fields whose value is absent."""
    return {k: v for k, v in fields.items() if v is not None}


def _laureate_summary(laureate: dict[str, Any]) -> dict[str, Any]:
    prizes = [
        category
        for prize in laureate.get("nobelPrizes") or []
        if (category := _en(prize, "categoryFullName")) is not None
    ]
    return _compact(
        name=_en(laureate, "knownName") or _en(laureate, "orgName"),
        gender=laureate.get("gender"),
        prizes=prizes or None,
    )


def simple_mapping(data: dict[str, Any]) -> list[Any]:
    """English known name of every laureate that has one."""
    names = []
    for laureate in data["laureates"]:
        name = _en(laureate, "knownName")
        if name is not None:
            names.append(name)
    return names


def complex_mapping(data: dict[str, Any]) -> list[dict[str, Any]]:
    """``{name, gender, prizes}`` per laureate."""
    return [_laureate_summary(laureate) for laureate in data["laureates"]]


def _by_name(entry: dict[str, Any]) -> tuple[bool, str]:
    # Entries without a name go last, as undefined sort keys do in JSONata.
    name = entry.get("name")
    return (name is None, name or "")


def complex_mapping_with_sort(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Complex mapping, stably sorted by name."""
    return sorted(complex_mapping(data), key=_by_name)


def complex_join(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Inner join of prizes and laureates on laureate id.

    ``data`` holds both fixtures under ``laureates`` and ``prizes``. A
    laureate shared by several prizes appears once per prize.
    """
    laureates = data["laureates"]["laureates"]
    joined = []
    for prize in data["prizes"]["nobelPrizes"]:
        ids = {member.get("id") for member in prize.get("laureates") or []}
        category = _en(prize, "categoryFullName")
        for laureate in laureates:
            if laureate.get("id") in ids:
                joined.append(
                    _compact(
                        name=_en(laureate, "knownName"),
                        gender=laureate.get("gender"),
                        prize=category,
                    )
                )
    return joined


def aggregates(data: dict[str, Any]) -> dict[str, Any]:
    """Count, sum, average, min and max of laureates per prize."""
    counts = [len(prize.get("laureates") or []) for prize in data["nobelPrizes"]]
    if not counts:
        msg = "cannot aggregate over an empty prize collection"
        raise EmptyAggregateError(msg)
    total = sum(counts)
    return {
        "count": len(counts),
        "sum": total,
        "average": total / len(counts),
        "min": min(counts),
        "max": max(counts),
    }
