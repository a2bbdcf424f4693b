"""CLI entrypoint for BookingMx."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import NoReturn, Optional

import typer

from .config import configure_logging
from .container import get_container
from .domain.errors import BookingMxError
from .services import ProximityService, ReservationService

app = typer.Typer(help="BookingMx - nearby cities and hotel reservations")
reservations_app = typer.Typer(help="Reservation commands")
app.add_typer(reservations_app, name="reservations")

_DATE_FORMATS = ["%Y-%m-%d"]


def _proximity() -> ProximityService:
    return get_container().resolve(ProximityService)


def _reservations() -> ReservationService:
    return get_container().resolve(ReservationService)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    """Configure logging before any command runs."""
    configure_logging()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@app.command("nearby")
def nearby_cmd(
    destination: str = typer.Argument(..., help="Destination city"),
    max_distance: Optional[float] = typer.Option(
        None, "--max-distance", "-d", help="Maximum distance in km"
    ),
) -> None:
    """List cities directly connected to DESTINATION within range."""
    service = _proximity()
    try:
        if not service.is_available:
            reason = service.last_validation.reason if service.last_validation else None
            _fail(f"No graph available ({reason})")
        results = service.nearby(destination, max_distance)
    except BookingMxError as e:
        _fail(str(e))
    for line in service.format_results(results):
        typer.echo(line)


@app.command("cities")
def cities_cmd() -> None:
    """List known cities."""
    try:
        cities = _proximity().cities()
    except BookingMxError as e:
        _fail(str(e))
    for city in cities:
        typer.echo(city)


@app.command("validate")
def validate_cmd() -> None:
    """Validate the configured graph dataset."""
    service = _proximity()
    try:
        service.reload()
    except BookingMxError as e:
        _fail(str(e))
    result = service.last_validation
    if result is None or not result.ok:
        _fail(f"invalid graph data: {result.reason if result else 'unknown'}")
    typer.echo("ok")


@reservations_app.command("list")
def reservations_list_cmd() -> None:
    """List reservations."""
    service = _reservations()
    try:
        items = service.list()
    except BookingMxError as e:
        _fail(str(e))
    for line in service.format_listing(items):
        typer.echo(line)


@reservations_app.command("create")
def reservations_create_cmd(
    guest: str = typer.Option(..., "--guest", help="Guest name"),
    hotel: str = typer.Option(..., "--hotel", help="Hotel name"),
    check_in: datetime = typer.Option(..., "--check-in", formats=_DATE_FORMATS),
    check_out: datetime = typer.Option(..., "--check-out", formats=_DATE_FORMATS),
) -> None:
    """Book a reservation."""
    service = _reservations()
    try:
        created = service.book(guest, hotel, check_in.date(), check_out.date())
    except (BookingMxError, ValueError) as e:
        _fail(str(e))
    typer.echo(service.format_reservation(created))


@reservations_app.command("update")
def reservations_update_cmd(
    reservation_id: str = typer.Argument(..., help="Reservation id"),
    guest: str = typer.Option(..., "--guest", help="Guest name"),
    hotel: str = typer.Option(..., "--hotel", help="Hotel name"),
    check_in: datetime = typer.Option(..., "--check-in", formats=_DATE_FORMATS),
    check_out: datetime = typer.Option(..., "--check-out", formats=_DATE_FORMATS),
) -> None:
    """Change an active reservation."""
    service = _reservations()
    try:
        updated = service.change(
            reservation_id, guest, hotel, check_in.date(), check_out.date()
        )
    except (BookingMxError, ValueError) as e:
        _fail(str(e))
    typer.echo(service.format_reservation(updated))


@reservations_app.command("cancel")
def reservations_cancel_cmd(
    reservation_id: str = typer.Argument(..., help="Reservation id"),
) -> None:
    """Cancel a reservation."""
    service = _reservations()
    try:
        service.cancel(reservation_id)
    except BookingMxError as e:
        _fail(str(e))
    typer.echo(f"Reservation {reservation_id} canceled")


if __name__ == "__main__":
    app()
