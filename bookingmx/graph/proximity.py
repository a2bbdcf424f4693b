"""Single-hop proximity queries over a city graph."""

from __future__ import annotations

from typing import Any, List

from ..domain.errors import InvalidGraphError
from ..domain.models import NearbyCity
from ..ports.graph import NeighborLookup

DEFAULT_MAX_DISTANCE_KM = 250.0


def get_nearby_cities(
    graph: NeighborLookup,
    destination: Any,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
) -> List[NearbyCity]:
    """Return the direct neighbors of ``destination`` within range.

    Only direct connections are considered; there is no multi-hop
    search. Results are sorted by ascending distance, ties keep the
    order in which edges were added. A zero or negative
    ``max_distance_km`` is accepted and simply filters everything out
    except zero-length edges.

    Args:
        graph: Any object exposing ``neighbors(city)`` and ``city in graph``.
        destination: City to search around. Unknown cities and non-strings
            yield an empty list.
        max_distance_km: Inclusive upper bound on the distance.

    Returns:
        List of NearbyCity sorted by distance.

    Raises:
        InvalidGraphError: If ``graph`` does not provide neighbor lookup.
    """
    if not isinstance(graph, NeighborLookup):
        raise InvalidGraphError(
            "graph must provide neighbor lookup",
            graph_type=type(graph).__name__,
        )

    if not isinstance(destination, str) or destination not in graph:
        return []

    in_range = [n for n in graph.neighbors(destination) if n.distance <= max_distance_km]
    # sorted() is stable, so equal distances keep edge-addition order
    in_range = sorted(in_range, key=lambda n: n.distance)
    return [NearbyCity(city=n.to, distance=n.distance) for n in in_range]
