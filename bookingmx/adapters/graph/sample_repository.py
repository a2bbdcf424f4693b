"""In-memory repository serving the bundled sample dataset."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import GraphData
from ...graph.sample import sample_data


@dataclass
class SampleGraphDataRepository:
    """GraphDataRepositoryPort backed by a dataset held in memory.

    Defaults to the Jalisco sample; tests can pass their own ``data``.
    Every ``load()`` returns a fresh copy.
    """

    data: Optional[GraphData] = field(default=None)

    def load(self) -> GraphData:
        if self.data is None:
            return sample_data()
        return copy.deepcopy(self.data)
