"""Graph construction from validated city and edge lists."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .store import GraphStore
from .validation import edge_fields


def build_graph(cities: Iterable[str], edges: Iterable[Mapping[str, Any]]) -> GraphStore:
    """Build a GraphStore from data that passed ``validate_graph_data``.

    Cities are added first, then edges, both in input order. Nothing is
    re-validated here; on unvalidated input the store's own errors
    propagate unchanged.

    Raises:
        InvalidNameError, UnknownCityError, InvalidDistanceError
    """
    graph = GraphStore()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        from_city, to_city, distance = edge_fields(edge)
        graph.add_edge(from_city, to_city, distance)
    return graph
