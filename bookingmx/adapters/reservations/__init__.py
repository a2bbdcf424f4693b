"""Reservation adapters - Implementations of the ReservationStorePort."""

from .http_client import HTTPReservationClient

__all__ = ["HTTPReservationClient"]
