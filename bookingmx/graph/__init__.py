"""City proximity graph.

This subpackage validates raw city/edge datasets, builds an undirected
weighted graph from them and answers "nearby cities" queries on it.
"""

from .builder import build_graph
from .proximity import DEFAULT_MAX_DISTANCE_KM, get_nearby_cities
from .sample import SAMPLE_DATA, sample_data
from .store import GraphStore, is_valid_distance
from .validation import validate_graph_data

__all__ = [
    "GraphStore",
    "is_valid_distance",
    "validate_graph_data",
    "build_graph",
    "get_nearby_cities",
    "DEFAULT_MAX_DISTANCE_KM",
    "SAMPLE_DATA",
    "sample_data",
]
