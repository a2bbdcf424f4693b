"""Reservation service - thin orchestration over the reservation store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from ..domain.models import Reservation, ReservationRequest
from ..ports.reservations import ReservationId, ReservationStorePort


@dataclass
class ReservationService:
    """Lists, books, changes and cancels hotel reservations.

    Store errors (ReservationApiError) propagate to the caller.

    Attributes:
        store: Reservation store implementation
    """

    store: ReservationStorePort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list(self) -> Sequence[Reservation]:
        return self.store.list_reservations()

    def get(self, reservation_id: ReservationId) -> Reservation:
        return self.store.get_reservation(reservation_id)

    def book(
        self, guest_name: str, hotel_name: str, check_in: date, check_out: date
    ) -> Reservation:
        """Create a reservation.

        Raises:
            ValueError: If the request is malformed (blank names, bad dates).
            ReservationApiError: If the store rejects it.
        """
        request = ReservationRequest(
            guest_name=guest_name,
            hotel_name=hotel_name,
            check_in=check_in,
            check_out=check_out,
        )
        return self.store.create_reservation(request)

    def change(
        self,
        reservation_id: ReservationId,
        guest_name: str,
        hotel_name: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        request = ReservationRequest(
            guest_name=guest_name,
            hotel_name=hotel_name,
            check_in=check_in,
            check_out=check_out,
        )
        return self.store.update_reservation(reservation_id, request)

    def cancel(self, reservation_id: ReservationId) -> Optional[Reservation]:
        return self.store.cancel_reservation(reservation_id)

    @staticmethod
    def format_reservation(reservation: Reservation) -> str:
        return (
            f"#{reservation.id} {reservation.guest_name} @ {reservation.hotel_name} "
            f"({reservation.check_in.isoformat()} -> {reservation.check_out.isoformat()}) "
            f"[{reservation.status.value}]"
        )

    def format_listing(self, reservations: Sequence[Reservation]) -> List[str]:
        if not reservations:
            return ["No reservations."]
        return [self.format_reservation(r) for r in reservations]
