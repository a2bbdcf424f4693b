"""Graph ports - Abstractions for graph lookup and dataset loading.

These protocols define the contracts for graph operations, so that
alternate graph implementations and dataset sources stay pluggable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..domain.models import GraphData, NeighborRecord


@runtime_checkable
class NeighborLookup(Protocol):
    """Structural contract required by proximity queries.

    Implementation: graph/store.py (GraphStore)

    Any object exposing a neighbor lookup keyed by city identifier and
    membership testing can be queried, not only GraphStore.
    """

    def neighbors(self, city: str) -> Sequence[NeighborRecord]:
        """Return the neighbor records of a known city.

        Args:
            city: The city identifier (e.g., 'Guadalajara').

        Returns:
            Sequence of neighbor records in edge-addition order.
        """
        ...

    def __contains__(self, city: object) -> bool:
        """Check whether the city is part of the graph."""
        ...


class GraphDataRepositoryPort(Protocol):
    """Port for loading raw graph datasets.

    Implementations:
    - adapters/graph/sample_repository.py (SampleGraphDataRepository)
    - adapters/graph/csv_repository.py (CSVGraphDataRepository)

    The repository only reads data. Validation and building are the
    caller's job, so malformed content never raises here.
    """

    def load(self) -> GraphData:
        """Load the raw dataset.

        Returns:
            Mapping with ``cities`` and ``edges`` lists.
        """
        ...
