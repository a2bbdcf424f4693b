"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BookingMxError,
    ConfigurationError,
    DatasetError,
    GraphError,
    InvalidDistanceError,
    InvalidGraphError,
    InvalidNameError,
    ReservationApiError,
    UnknownCityError,
)
from .models import (
    GraphData,
    NearbyCity,
    NeighborRecord,
    Reservation,
    ReservationRequest,
    ReservationStatus,
    ValidationResult,
)

__all__ = [
    # Models
    "GraphData",
    "NeighborRecord",
    "NearbyCity",
    "ValidationResult",
    "Reservation",
    "ReservationRequest",
    "ReservationStatus",
    # Errors
    "BookingMxError",
    "GraphError",
    "InvalidNameError",
    "UnknownCityError",
    "InvalidDistanceError",
    "InvalidGraphError",
    "DatasetError",
    "ReservationApiError",
    "ConfigurationError",
]
