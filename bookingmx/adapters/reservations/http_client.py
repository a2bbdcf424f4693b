"""HTTP client for the BookingMx reservation API.

Endpoints (relative to the configured base URL):
- GET    /        list reservations
- GET    /{id}    fetch one reservation
- POST   /        create a reservation
- PUT    /{id}    update an active reservation
- DELETE /{id}    cancel a reservation (kept, marked CANCELED)

Non-OK responses raise ReservationApiError carrying the server's
``message`` field when it sends one, else a per-operation default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import requests

from ...config import ReservationApiConfig, get_config
from ...domain.errors import ReservationApiError
from ...domain.models import Reservation, ReservationRequest
from ...ports.reservations import ReservationId

_DEFAULT_MESSAGES: Dict[str, str] = {
    "list": "Failed to fetch reservations",
    "get": "Fetch failed",
    "create": "Create failed",
    "update": "Update failed",
    "cancel": "Cancel failed",
}


@dataclass
class HTTPReservationClient:
    """Reservation store adapter speaking JSON over HTTP.

    This adapter implements ReservationStorePort.

    Attributes:
        config: API configuration (base URL, timeout)
        session: requests session, injectable for tests
    """

    config: ReservationApiConfig = field(default_factory=lambda: get_config().api)
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def _url(self, reservation_id: Optional[ReservationId] = None) -> str:
        if reservation_id is None:
            return self.base_url
        return f"{self.base_url}/{quote(str(reservation_id), safe='')}"

    def _request(
        self,
        operation: str,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Send a request and return its JSON body, run through ``parse``.

        An empty body decodes to None. A body that is not JSON or does not
        match the reservation shape raises ReservationApiError.
        """
        self._logger.debug(
            "Reservation API request",
            extra={"operation": operation, "method": method, "url": url},
        )
        kwargs: Dict[str, Any] = {"timeout": self.config.timeout_seconds}
        if payload is not None:
            kwargs["json"] = payload
            kwargs["headers"] = {"Content-Type": "application/json"}

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            self._logger.warning(
                "Reservation API unreachable",
                extra={"operation": operation, "error": str(e)},
            )
            raise ReservationApiError(
                _DEFAULT_MESSAGES[operation], cause=e, operation=operation
            )

        if not response.ok:
            message = self._error_message(response) or _DEFAULT_MESSAGES[operation]
            self._logger.warning(
                "Reservation API error",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise ReservationApiError(
                message, operation=operation, status_code=response.status_code
            )

        try:
            body = response.json() if response.content else None
            return parse(body) if parse is not None else body
        except (KeyError, ValueError, TypeError) as e:
            self._logger.warning(
                "Reservation API returned a malformed body",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise ReservationApiError(
                _DEFAULT_MESSAGES[operation],
                cause=e,
                operation=operation,
                status_code=response.status_code,
            )

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return None

    @staticmethod
    def _parse_list(body: Any) -> List[Reservation]:
        return [Reservation.from_payload(item) for item in body or []]

    @staticmethod
    def _parse_echo(body: Any) -> Optional[Reservation]:
        if isinstance(body, dict) and "id" in body:
            return Reservation.from_payload(body)
        return None

    def list_reservations(self) -> List[Reservation]:
        return self._request("list", "GET", self._url(), parse=self._parse_list)

    def get_reservation(self, reservation_id: ReservationId) -> Reservation:
        return self._request(
            "get", "GET", self._url(reservation_id), parse=Reservation.from_payload
        )

    def create_reservation(self, request: ReservationRequest) -> Reservation:
        reservation = self._request(
            "create",
            "POST",
            self._url(),
            request.to_payload(),
            parse=Reservation.from_payload,
        )
        self._logger.info("Reservation created", extra={"reservation_id": reservation.id})
        return reservation

    def update_reservation(
        self, reservation_id: ReservationId, request: ReservationRequest
    ) -> Reservation:
        return self._request(
            "update",
            "PUT",
            self._url(reservation_id),
            request.to_payload(),
            parse=Reservation.from_payload,
        )

    def cancel_reservation(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """Cancel a reservation.

        The API answers 204 No Content, in which case None is returned.
        """
        canceled = self._request(
            "cancel", "DELETE", self._url(reservation_id), parse=self._parse_echo
        )
        self._logger.info(
            "Reservation canceled", extra={"reservation_id": str(reservation_id)}
        )
        return canceled
