"""Bundled sample dataset: cities around Guadalajara, Jalisco.

Distances are approximate road distances in kilometers.
"""

from __future__ import annotations

import copy

from ..domain.models import GraphData

SAMPLE_DATA: GraphData = {
    "cities": [
        "Guadalajara",
        "Tlaquepaque",
        "Zapopan",
        "Tepatitlán",
        "Lagos de Moreno",
        "Tala",
        "Tequila",
    ],
    "edges": [
        {"from": "Guadalajara", "to": "Zapopan", "distance": 12},
        {"from": "Guadalajara", "to": "Tlaquepaque", "distance": 10},
        {"from": "Guadalajara", "to": "Tepatitlán", "distance": 78},
        {"from": "Guadalajara", "to": "Tequila", "distance": 60},
        {"from": "Zapopan", "to": "Tala", "distance": 35},
        {"from": "Tepatitlán", "to": "Lagos de Moreno", "distance": 85},
    ],
}


def sample_data() -> GraphData:
    """Return an independent copy of the sample dataset."""
    return copy.deepcopy(SAMPLE_DATA)
