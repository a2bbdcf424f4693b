"""CSV graph dataset repository.

Reads the city list and edge list from two CSV files:
- cities.csv with a ``city`` column
- edges.csv with ``from_city``, ``to_city`` and ``distance_km`` columns

The repository does not judge content: blank cities or unparsable
distances are passed through so the validator can report them.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...config import GraphConfig, get_config
from ...domain.errors import DatasetError
from ...domain.models import GraphData


def _parse_distance(raw: str) -> Union[float, str]:
    try:
        return float(raw)
    except ValueError:
        return raw


@dataclass
class CSVGraphDataRepository:
    """Graph dataset repository that loads from CSV files.

    This adapter implements GraphDataRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _data: Optional[GraphData] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphData:
        """Load the raw dataset from CSV files.

        Returns:
            Mapping with ``cities`` and ``edges`` lists.

        Raises:
            DatasetError: If a file cannot be read, decoded or lacks a column.
        """
        if self._data is not None:
            return self._data

        self._logger.debug(
            "Loading graph dataset",
            extra={
                "cities_path": str(self.config.cities_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        path = self.config.cities_path
        try:
            cities = self._read_cities(path)
            path = self.config.edges_path
            edges = self._read_edges(path)
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise DatasetError(
                f"Failed to load graph dataset: {e}",
                file_path=str(path),
                cause=e,
            )

        self._data = {"cities": cities, "edges": edges}
        self._logger.info(
            "Graph dataset loaded",
            extra={"cities": len(cities), "edges": len(edges)},
        )
        return self._data

    def _read_cities(self, path: Path) -> List[str]:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            self._require_columns(reader, ["city"])
            return [(row["city"] or "").strip() for row in reader]

    def _read_edges(self, path: Path) -> List[Dict[str, Any]]:
        edges: List[Dict[str, Any]] = []
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            self._require_columns(reader, ["from_city", "to_city", "distance_km"])
            for row in reader:
                edges.append(
                    {
                        "from": (row["from_city"] or "").strip(),
                        "to": (row["to_city"] or "").strip(),
                        "distance": _parse_distance((row["distance_km"] or "").strip()),
                    }
                )
        return edges

    @staticmethod
    def _require_columns(reader: csv.DictReader, columns: List[str]) -> None:
        header = reader.fieldnames or []
        for column in columns:
            if column not in header:
                raise KeyError(f"missing column {column!r}")

    def clear_cache(self) -> None:
        """Clear the cached dataset."""
        self._data = None
        self._logger.debug("Graph dataset cache cleared")
