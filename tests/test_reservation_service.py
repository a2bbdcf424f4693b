"""Tests for reservation models and ReservationService."""

from datetime import date

import pytest

from bookingmx.domain.errors import ReservationApiError
from bookingmx.domain.models import Reservation, ReservationRequest, ReservationStatus
from bookingmx.services import ReservationService


class FakeStore:
    def __init__(self):
        self.items = {}
        self.next_id = 1

    def list_reservations(self):
        return list(self.items.values())

    def get_reservation(self, reservation_id):
        try:
            return self.items[int(reservation_id)]
        except KeyError:
            raise ReservationApiError("Reservation not found", operation="get", status_code=404)

    def create_reservation(self, request):
        reservation = Reservation(
            id=self.next_id,
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
        )
        self.items[reservation.id] = reservation
        self.next_id += 1
        return reservation

    def update_reservation(self, reservation_id, request):
        existing = self.get_reservation(reservation_id)
        if not existing.is_active:
            raise ReservationApiError(
                "Cannot update a canceled reservation", operation="update", status_code=400
            )
        updated = Reservation(
            id=existing.id,
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
        )
        self.items[existing.id] = updated
        return updated

    def cancel_reservation(self, reservation_id):
        existing = self.get_reservation(reservation_id)
        canceled = Reservation(
            id=existing.id,
            guest_name=existing.guest_name,
            hotel_name=existing.hotel_name,
            check_in=existing.check_in,
            check_out=existing.check_out,
            status=ReservationStatus.CANCELED,
        )
        self.items[existing.id] = canceled
        return None


@pytest.fixture
def service():
    return ReservationService(store=FakeStore())


def test_request_rejects_blank_names():
    with pytest.raises(ValueError, match="Guest name cannot be blank"):
        ReservationRequest("  ", "Hotel", date(2030, 1, 1), date(2030, 1, 2))
    with pytest.raises(ValueError, match="Hotel name cannot be blank"):
        ReservationRequest("Ana", "", date(2030, 1, 1), date(2030, 1, 2))


@pytest.mark.parametrize("check_out", [date(2030, 1, 1), date(2029, 12, 31)])
def test_request_rejects_checkout_not_after_checkin(check_out):
    with pytest.raises(ValueError, match="Check-out must be after check-in"):
        ReservationRequest("Ana", "Hotel", date(2030, 1, 1), check_out)


def test_request_payload_trims_names():
    request = ReservationRequest(" Ana ", " Hotel Real ", date(2030, 1, 1), date(2030, 1, 3))
    assert request.to_payload() == {
        "guestName": "Ana",
        "hotelName": "Hotel Real",
        "checkIn": "2030-01-01",
        "checkOut": "2030-01-03",
    }


def test_reservation_from_payload_defaults_to_active():
    reservation = Reservation.from_payload(
        {
            "id": "7",
            "guestName": "Ana",
            "hotelName": "Hotel Real",
            "checkIn": "2030-01-01",
            "checkOut": "2030-01-03",
        }
    )
    assert reservation.id == 7
    assert reservation.is_active


def test_reservation_from_payload_missing_field():
    with pytest.raises(KeyError):
        Reservation.from_payload({"id": 1})


def test_book_change_and_cancel(service):
    created = service.book("Ana", "Hotel Real", date(2030, 1, 1), date(2030, 1, 3))
    assert created.id == 1

    changed = service.change(1, "Ana", "Hotel Azul", date(2030, 2, 1), date(2030, 2, 3))
    assert changed.hotel_name == "Hotel Azul"

    assert service.cancel(1) is None
    assert service.get(1).status is ReservationStatus.CANCELED

    with pytest.raises(ReservationApiError, match="Cannot update a canceled reservation"):
        service.change(1, "Ana", "Hotel Azul", date(2030, 2, 1), date(2030, 2, 3))


def test_book_validates_before_calling_store(service):
    with pytest.raises(ValueError):
        service.book("Ana", "Hotel", date(2030, 1, 5), date(2030, 1, 1))
    assert service.list() == []


def test_store_errors_propagate(service):
    with pytest.raises(ReservationApiError) as exc:
        service.cancel(99)
    assert exc.value.status_code == 404


def test_format_listing(service):
    assert service.format_listing([]) == ["No reservations."]

    service.book("Ana", "Hotel Real", date(2030, 1, 1), date(2030, 1, 3))
    assert service.format_listing(service.list()) == [
        "#1 Ana @ Hotel Real (2030-01-01 -> 2030-01-03) [ACTIVE]"
    ]
