"""Structural validation of raw graph datasets.

``validate_graph_data`` checks a ``{cities, edges}`` payload before a
graph is built from it. Failures are returned, not raised, so that bad
startup data degrades to "no graph available". The checks run in a
fixed order and the first failure wins.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..domain.models import ValidationResult
from .store import is_valid_distance

REASON_NOT_ARRAYS = "cities/edges must be arrays"
REASON_DUPLICATE_CITIES = "duplicate cities"
REASON_INVALID_CITY = "invalid city entry"
REASON_UNKNOWN_CITY = "edge references unknown city"
REASON_INVALID_DISTANCE = "invalid distance"

_MISSING = object()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def edge_fields(edge: Any) -> Tuple[Any, Any, Any]:
    """Return ``(from, to, distance)`` of a raw edge mapping.

    ``from_city``/``to_city`` are accepted as aliases of ``from``/``to``.
    Missing fields (or a non-mapping edge) come back as a sentinel that
    never matches a city or a valid distance.
    """
    if not isinstance(edge, Mapping):
        return _MISSING, _MISSING, _MISSING
    from_city = edge.get("from", edge.get("from_city", _MISSING))
    to_city = edge.get("to", edge.get("to_city", _MISSING))
    return from_city, to_city, edge.get("distance", _MISSING)


def _has_duplicates(cities: Any) -> bool:
    # keyed on type so 1, 1.0 and True stay distinct entries
    seen: list = []
    hashed: set = set()
    for city in cities:
        key = (type(city), city)
        try:
            if key in hashed:
                return True
            hashed.add(key)
        except TypeError:
            if key in seen:
                return True
            seen.append(key)
    return False


def _known(city: Any, city_set: frozenset) -> bool:
    try:
        return city in city_set
    except TypeError:
        return False


def _fail(reason: str) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason)


def validate_graph_data(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    """Validate a raw graph dataset.

    Args:
        data: Mapping with ``cities`` (sequence of str) and ``edges``
            (sequence of ``{from, to, distance}`` mappings).

    Returns:
        ``ValidationResult(ok=True)`` or ``ValidationResult(ok=False, reason=...)``.
        The input is never mutated.
    """
    cities = data.get("cities") if isinstance(data, Mapping) else None
    edges = data.get("edges") if isinstance(data, Mapping) else None

    if not _is_sequence(cities) or not _is_sequence(edges):
        return _fail(REASON_NOT_ARRAYS)

    if _has_duplicates(cities):
        return _fail(REASON_DUPLICATE_CITIES)

    for city in cities:
        if not isinstance(city, str) or not city.strip():
            return _fail(REASON_INVALID_CITY)

    city_set = frozenset(cities)
    for edge in edges:
        from_city, to_city, distance = edge_fields(edge)
        if not _known(from_city, city_set) or not _known(to_city, city_set):
            return _fail(REASON_UNKNOWN_CITY)
        if not is_valid_distance(distance):
            return _fail(REASON_INVALID_DISTANCE)

    return ValidationResult(ok=True)
