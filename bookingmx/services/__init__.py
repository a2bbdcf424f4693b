"""Services layer - Application orchestration.

This module contains the main application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- ProximityService: Graph lifecycle and nearby-city queries
- ReservationService: Hotel reservation management
"""

from .proximity_service import NO_RESULTS_MESSAGE, ProximityService
from .reservation_service import ReservationService

__all__ = ["ProximityService", "ReservationService", "NO_RESULTS_MESSAGE"]
