"""Tests for the HTTP reservation client."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from bookingmx.adapters.reservations import HTTPReservationClient
from bookingmx.config import ReservationApiConfig
from bookingmx.domain.errors import ReservationApiError
from bookingmx.domain.models import Reservation, ReservationRequest, ReservationStatus

BASE_URL = "http://localhost:8080/api/reservations"

RESERVATION_JSON = {
    "id": 1,
    "guestName": "Juan Pérez",
    "hotelName": "Paradise Inn",
    "checkIn": "2030-12-01",
    "checkOut": "2030-12-05",
    "status": "ACTIVE",
}


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return HTTPReservationClient(
        config=ReservationApiConfig(base_url=BASE_URL + "/", timeout_seconds=3),
        session=session,
    )


@pytest.fixture
def request_payload():
    return ReservationRequest(
        guest_name="Juan Pérez",
        hotel_name="Paradise Inn",
        check_in=date(2030, 12, 1),
        check_out=date(2030, 12, 5),
    )


class TestListReservations:
    def test_returns_reservations_on_success(self, client, session):
        session.request.return_value = _response(200, [RESERVATION_JSON])

        result = client.list_reservations()

        assert result == [
            Reservation(
                id=1,
                guest_name="Juan Pérez",
                hotel_name="Paradise Inn",
                check_in=date(2030, 12, 1),
                check_out=date(2030, 12, 5),
                status=ReservationStatus.ACTIVE,
            )
        ]
        session.request.assert_called_once_with("GET", BASE_URL, timeout=3)

    def test_raises_on_failure(self, client, session):
        session.request.return_value = _response(500)

        with pytest.raises(ReservationApiError, match="Failed to fetch reservations") as exc:
            client.list_reservations()
        assert exc.value.status_code == 500
        assert exc.value.operation == "list"

    def test_transport_error_is_wrapped(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ReservationApiError) as exc:
            client.list_reservations()
        assert exc.value.message == "Failed to fetch reservations"
        assert exc.value.status_code is None
        assert isinstance(exc.value.cause, requests.ConnectionError)


class TestCreateReservation:
    def test_posts_json_payload(self, client, session, request_payload):
        session.request.return_value = _response(201, RESERVATION_JSON)

        created = client.create_reservation(request_payload)

        assert created.id == 1
        session.request.assert_called_once_with(
            "POST",
            BASE_URL,
            timeout=3,
            json={
                "guestName": "Juan Pérez",
                "hotelName": "Paradise Inn",
                "checkIn": "2030-12-01",
                "checkOut": "2030-12-05",
            },
            headers={"Content-Type": "application/json"},
        )

    def test_uses_server_message(self, client, session, request_payload):
        session.request.return_value = _response(400, {"message": "Check-in must be in the future"})

        with pytest.raises(ReservationApiError, match="Check-in must be in the future"):
            client.create_reservation(request_payload)

    def test_generic_message_when_server_sends_none(self, client, session, request_payload):
        session.request.return_value = _response(400, {})

        with pytest.raises(ReservationApiError, match="Create failed"):
            client.create_reservation(request_payload)


class TestUpdateReservation:
    def test_puts_to_reservation_url(self, client, session, request_payload):
        session.request.return_value = _response(200, dict(RESERVATION_JSON, id=5))

        updated = client.update_reservation(5, request_payload)

        assert updated.id == 5
        method, url = session.request.call_args.args
        assert (method, url) == ("PUT", f"{BASE_URL}/5")

    def test_uses_server_message(self, client, session, request_payload):
        session.request.return_value = _response(
            400, {"message": "Cannot update a canceled reservation"}
        )

        with pytest.raises(ReservationApiError, match="Cannot update a canceled reservation"):
            client.update_reservation("5", request_payload)

    def test_generic_message_on_non_json_error(self, client, session, request_payload):
        response = requests.Response()
        response.status_code = 502
        response._content = b"<html>Bad Gateway</html>"
        session.request.return_value = response

        with pytest.raises(ReservationApiError, match="Update failed"):
            client.update_reservation(5, request_payload)


class TestCancelReservation:
    def test_no_content_returns_none(self, client, session):
        session.request.return_value = _response(204)

        assert client.cancel_reservation(9) is None
        session.request.assert_called_once_with("DELETE", f"{BASE_URL}/9", timeout=3)

    def test_echoed_reservation_is_parsed(self, client, session):
        session.request.return_value = _response(200, dict(RESERVATION_JSON, status="CANCELED"))

        canceled = client.cancel_reservation(1)

        assert canceled.status is ReservationStatus.CANCELED
        assert not canceled.is_active

    def test_id_is_url_quoted(self, client, session):
        session.request.return_value = _response(204)

        client.cancel_reservation("a/b c")

        assert session.request.call_args.args[1] == f"{BASE_URL}/a%2Fb%20c"

    def test_uses_server_message(self, client, session):
        session.request.return_value = _response(404, {"message": "Reservation not found"})

        with pytest.raises(ReservationApiError, match="Reservation not found") as exc:
            client.cancel_reservation("x")
        assert exc.value.status_code == 404

    def test_generic_message_when_server_sends_none(self, client, session):
        session.request.return_value = _response(500, {})

        with pytest.raises(ReservationApiError, match="Cancel failed"):
            client.cancel_reservation("x")


def test_get_reservation(client, session):
    session.request.return_value = _response(200, RESERVATION_JSON)

    assert client.get_reservation(1).hotel_name == "Paradise Inn"
    session.request.assert_called_once_with("GET", f"{BASE_URL}/1", timeout=3)


class TestMalformedSuccessBody:
    def test_list_entry_missing_fields(self, client, session):
        session.request.return_value = _response(200, [{"id": 1}])

        with pytest.raises(ReservationApiError, match="Failed to fetch reservations") as exc:
            client.list_reservations()
        assert exc.value.status_code == 200
        assert exc.value.operation == "list"
        assert isinstance(exc.value.cause, KeyError)

    def test_non_json_body(self, client, session):
        response = _response(200)
        response._content = b"not json"
        session.request.return_value = response

        with pytest.raises(ReservationApiError, match="Fetch failed") as exc:
            client.get_reservation(1)
        assert exc.value.status_code == 200
        assert isinstance(exc.value.cause, ValueError)

    def test_unknown_status_on_create(self, client, session, request_payload):
        session.request.return_value = _response(201, {**RESERVATION_JSON, "status": "PENDING"})

        with pytest.raises(ReservationApiError, match="Create failed") as exc:
            client.create_reservation(request_payload)
        assert exc.value.status_code == 201
