"""Immutable domain models for BookingMx.

All models are frozen dataclasses with slots. Neighbor records are
value-like (identifier + number), so the graph can hand out copies
without sharing mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# Raw dataset shape: {"cities": [...], "edges": [{"from", "to", "distance"}, ...]}
GraphData = Dict[str, Any]


@dataclass(frozen=True, slots=True)
class NeighborRecord:
    """One direction of an edge as stored in a city's adjacency entry.

    Attributes:
        to: Identifier of the neighboring city
        distance: Edge weight in kilometers
    """

    to: str
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"to": self.to, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class NearbyCity:
    """A single result of a proximity query.

    Attributes:
        city: Name of the nearby city
        distance: Direct distance from the destination in kilometers
    """

    city: str
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"city": self.city, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a raw graph dataset.

    Attributes:
        ok: True when the dataset can be built into a graph
        reason: Short diagnostic when ok is False
    """

    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True}
        return {"ok": False, "reason": self.reason}


class ReservationStatus(str, Enum):
    """Lifecycle state of a hotel reservation."""

    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


@dataclass(frozen=True, slots=True)
class ReservationRequest:
    """Payload for creating or updating a reservation.

    Validation mirrors the reservation backend so obviously broken
    requests fail before any HTTP round-trip.

    Attributes:
        guest_name: Name of the guest
        hotel_name: Name of the hotel
        check_in: Arrival date
        check_out: Departure date, strictly after check_in
    """

    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        """Validate names and date ordering."""
        if not self.guest_name or not self.guest_name.strip():
            raise ValueError("Guest name cannot be blank")
        if not self.hotel_name or not self.hotel_name.strip():
            raise ValueError("Hotel name cannot be blank")
        if self.check_out <= self.check_in:
            raise ValueError("Check-out must be after check-in")

    def to_payload(self) -> Dict[str, str]:
        """Serialize to the JSON body expected by the reservation API."""
        return {
            "guestName": self.guest_name.strip(),
            "hotelName": self.hotel_name.strip(),
            "checkIn": self.check_in.isoformat(),
            "checkOut": self.check_out.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class Reservation:
    """A hotel reservation as returned by the reservation API.

    Attributes:
        id: Server-assigned identifier
        guest_name: Name of the guest
        hotel_name: Name of the hotel
        check_in: Arrival date
        check_out: Departure date
        status: ACTIVE or CANCELED
    """

    id: int
    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date
    status: ReservationStatus = ReservationStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is ReservationStatus.ACTIVE

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Reservation:
        """Build a reservation from the API's camelCase JSON object.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a date or status cannot be parsed.
        """
        return cls(
            id=int(payload["id"]),
            guest_name=str(payload["guestName"]),
            hotel_name=str(payload["hotelName"]),
            check_in=date.fromisoformat(str(payload["checkIn"])),
            check_out=date.fromisoformat(str(payload["checkOut"])),
            status=ReservationStatus(payload.get("status") or "ACTIVE"),
        )
