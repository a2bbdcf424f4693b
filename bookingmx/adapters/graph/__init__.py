"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- SampleGraphDataRepository: Serves the bundled (or an injected) dataset
- CSVGraphDataRepository: Loads the dataset from CSV files
"""

from .csv_repository import CSVGraphDataRepository
from .sample_repository import SampleGraphDataRepository

__all__ = ["CSVGraphDataRepository", "SampleGraphDataRepository"]
