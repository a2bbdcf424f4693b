"""Reservation port - Abstraction over the hotel reservation store.

The store lives behind an HTTP API owned by another service. Errors
from it are surfaced to the caller, never retried here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import Reservation, ReservationRequest

ReservationId = Union[int, str]


class ReservationStorePort(Protocol):
    """Port for listing and changing reservations.

    Implementation: adapters/reservations/http_client.py
    """

    def list_reservations(self) -> Sequence[Reservation]:
        """Return every reservation, active and canceled."""
        ...

    def get_reservation(self, reservation_id: ReservationId) -> Reservation:
        """Return a single reservation.

        Raises:
            ReservationApiError: If it does not exist or the call fails.
        """
        ...

    def create_reservation(self, request: ReservationRequest) -> Reservation:
        """Create a reservation and return it with its assigned id."""
        ...

    def update_reservation(
        self, reservation_id: ReservationId, request: ReservationRequest
    ) -> Reservation:
        """Replace the details of an active reservation."""
        ...

    def cancel_reservation(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """Mark a reservation as canceled.

        Returns:
            The canceled reservation if the store echoes it, else None.
        """
        ...
