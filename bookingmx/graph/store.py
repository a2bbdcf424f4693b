"""Undirected weighted city graph.

The store maps each city identifier to an owned list of neighbor
records. Neighbor order reflects edge-addition order. The graph is
populated once during a build phase and then only read.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Dict, Iterator, List, Tuple

from ..domain.errors import InvalidDistanceError, InvalidNameError, UnknownCityError
from ..domain.models import NeighborRecord


def is_valid_distance(value: Any) -> bool:
    """Return True if ``value`` is a finite real number >= 0.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value >= 0


class GraphStore:
    """Adjacency-list container for cities and their direct distances.

    Example:
        g = GraphStore()
        g.add_city("Guadalajara")
        g.add_city("Zapopan")
        g.add_edge("Guadalajara", "Zapopan", 12)
        g.neighbors("Guadalajara")
        # [NeighborRecord(to='Zapopan', distance=12.0)]
    """

    def __init__(self) -> None:
        self._adj: Dict[str, List[NeighborRecord]] = {}

    def add_city(self, name: str) -> None:
        """Add a city; adding an existing city is a no-op.

        Raises:
            InvalidNameError: If ``name`` is not a non-empty string.
        """
        if not name or not isinstance(name, str):
            raise InvalidNameError("Invalid city name", name=name)
        if name not in self._adj:
            self._adj[name] = []

    def add_edge(self, from_city: str, to_city: str, distance: float) -> None:
        """Connect two existing cities in both directions.

        Self-loops are allowed and produce two entries on the same city.

        Raises:
            UnknownCityError: If either endpoint was never added.
            InvalidDistanceError: If ``distance`` is negative or not finite.
        """
        for city in (from_city, to_city):
            if not self._has(city):
                raise UnknownCityError(f"Unknown city: {city!r}", city=city)
        if not is_valid_distance(distance):
            raise InvalidDistanceError(
                f"Invalid distance: {distance!r}", distance=distance
            )

        km = float(distance)
        self._adj[from_city].append(NeighborRecord(to=to_city, distance=km))
        self._adj[to_city].append(NeighborRecord(to=from_city, distance=km))

    def neighbors(self, city: str) -> List[NeighborRecord]:
        """Return a copy of the neighbor list of ``city``.

        Raises:
            UnknownCityError: If ``city`` is not in the graph.
        """
        if not self._has(city):
            raise UnknownCityError(f"Unknown city: {city!r}", city=city)
        return list(self._adj[city])

    def cities(self) -> Tuple[str, ...]:
        """Return city identifiers in insertion order."""
        return tuple(self._adj)

    def edge_count(self) -> int:
        return sum(len(records) for records in self._adj.values()) // 2

    def _has(self, city: Any) -> bool:
        try:
            return city in self._adj
        except TypeError:
            # unhashable lookups are simply unknown
            return False

    def __contains__(self, city: object) -> bool:
        return self._has(city)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"GraphStore(cities={len(self)}, edges={self.edge_count()})"
