"""Proximity service - loads the city graph and answers nearby queries.

The service owns the graph lifecycle: load the raw dataset, validate
it, build a GraphStore and publish it. A published store is never
mutated; ``reload()`` builds a new one and swaps the reference.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..domain.models import NearbyCity, ValidationResult
from ..graph import (
    DEFAULT_MAX_DISTANCE_KM,
    GraphStore,
    build_graph,
    get_nearby_cities,
    validate_graph_data,
)
from ..ports.graph import GraphDataRepositoryPort

NO_RESULTS_MESSAGE = "No nearby cities found. Check destination or adjust distance."


@dataclass
class ProximityService:
    """Main service for "cities near my destination" requests.

    Attributes:
        repository: Source of the raw graph dataset
        default_max_distance_km: Used when a query gives no distance
    """

    repository: GraphDataRepositoryPort
    default_max_distance_km: float = DEFAULT_MAX_DISTANCE_KM

    _graph: Optional[GraphStore] = field(default=None, init=False, repr=False)
    _last_validation: Optional[ValidationResult] = field(
        default=None, init=False, repr=False
    )
    _loaded: bool = field(default=False, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Optional[GraphStore]:
        """Load the graph once; later calls return the published graph."""
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self.reload()
        return self._graph

    def reload(self) -> Optional[GraphStore]:
        """Rebuild the graph from the repository and publish it.

        Invalid data leaves no graph available instead of raising.

        Raises:
            DatasetError: If the repository cannot read its source.
        """
        data = self.repository.load()
        validation = validate_graph_data(data)

        graph: Optional[GraphStore] = None
        if validation.ok:
            graph = build_graph(data["cities"], data["edges"])
            self._logger.info(
                "Graph built",
                extra={"cities": len(graph), "edges": graph.edge_count()},
            )
        else:
            self._logger.warning(
                "Graph data rejected",
                extra={"reason": validation.reason},
            )

        with self._lock:
            self._graph = graph
            self._last_validation = validation
            self._loaded = True
        return graph

    @property
    def graph(self) -> Optional[GraphStore]:
        return self._graph

    @property
    def last_validation(self) -> Optional[ValidationResult]:
        return self._last_validation

    @property
    def is_available(self) -> bool:
        return self.load() is not None

    def cities(self) -> Sequence[str]:
        graph = self.load()
        return graph.cities() if graph is not None else ()

    def nearby(
        self, destination: Any, max_distance_km: Optional[Any] = None
    ) -> List[NearbyCity]:
        """Find cities directly connected to ``destination`` within range.

        Args:
            destination: User-supplied city name; surrounding whitespace
                is ignored.
            max_distance_km: Number or numeric string; defaults to
                ``default_max_distance_km``.

        Returns:
            Sorted nearby cities, empty when nothing matches or no graph
            is available.

        Raises:
            ValueError: If ``max_distance_km`` is not numeric.
        """
        graph = self.load()
        if graph is None:
            return []

        if isinstance(destination, str):
            destination = destination.strip()
        limit = (
            self.default_max_distance_km
            if max_distance_km is None
            else float(max_distance_km)
        )

        results = get_nearby_cities(graph, destination, limit)
        self._logger.debug(
            "Nearby query",
            extra={
                "destination": destination,
                "max_distance_km": limit,
                "results": len(results),
            },
        )
        return results

    @staticmethod
    def format_results(results: Sequence[NearbyCity]) -> List[str]:
        """Render results as display lines."""
        if not results:
            return [NO_RESULTS_MESSAGE]
        return [f"{r.city} - {r.distance:g} km" for r in results]
