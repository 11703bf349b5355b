"""CLI commands for the Appointment aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from barber.application.dto import AppointmentRequest
from barber.domain.exceptions import DomainException
from barber.domain.model.appointment import Appointment
from barber.infrastructure import config
from barber.infrastructure.bootstrap import appointment_service


def _parse_time(raw: str, option: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values get the configured zone."""
    try:
        value = datetime.fromisoformat(raw.strip())
    except ValueError:
        raise click.BadParameter(
            f"Invalid timestamp '{raw}'. Expected ISO-8601, e.g. 2026-10-20T10:00:00-03:00.",
            param_hint=option,
        )
    if value.tzinfo is None:
        value = value.replace(tzinfo=config.app_timezone())
    return value


def _parse_product_ids(raw: str | None) -> list[int]:
    """Parse '1,2,2' into [1, 2, 2]. Order and repeats are kept."""
    if not raw or not raw.strip():
        return []
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(
                f"Invalid product ID '{part}'.", param_hint="--products"
            )
    return ids


def _build_request(
    client: str, start: str, end: str, products: str | None
) -> AppointmentRequest:
    return AppointmentRequest(
        client_name=client,
        start_time=_parse_time(start, "--start"),
        end_time=_parse_time(end, "--end"),
        product_ids=_parse_product_ids(products),
    )


def _display_appointment(appt: Appointment) -> None:
    """Shared formatting for displaying an appointment."""
    tz = config.app_timezone()
    click.echo(f"Appointment #{appt.id}")
    click.echo(f"Client: {appt.client_name}")
    click.echo(f"Start:  {appt.start_time.astimezone(tz):%Y-%m-%d %H:%M %Z}")
    click.echo(f"End:    {appt.end_time.astimezone(tz):%Y-%m-%d %H:%M %Z}")
    click.echo(f"Length: {int(appt.slot.duration.total_seconds() // 60)} min")
    click.echo()

    if appt.products:
        click.echo(f"  {'Product':<20} {'Price':>10}")
        click.echo(f"  {'-'*31}")
        for p in appt.products:
            click.echo(f"  {p.name:<20} {str(p.price):>10}")
        click.echo(f"  {'-'*31}")
    click.echo(f"  {'Total':<20} {str(appt.total):>10}")


_booking_options = [
    click.option("--client", required=True, help="Client name."),
    click.option("--start", required=True, help="Start time (ISO-8601)."),
    click.option("--end", required=True, help="End time (ISO-8601)."),
    click.option("--products", default=None, help="Product IDs as '1,2,3'."),
]


def _with_booking_options(func):
    for option in reversed(_booking_options):
        func = option(func)
    return func


@click.command("schedule")
@_with_booking_options
def appointment_schedule(client: str, start: str, end: str, products: str | None) -> None:
    """Book a new appointment."""
    request = _build_request(client, start, end, products)

    try:
        appt = appointment_service().schedule(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Appointment #{appt.id} scheduled.")
    _display_appointment(appt)


@click.command("list")
def appointment_list() -> None:
    """List all appointments."""
    try:
        appointments = appointment_service().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not appointments:
        click.echo("No appointments found.")
        return

    tz = config.app_timezone()
    click.echo(f"{'ID':<6} {'Client':<20} {'Start':<17} {'End':<17} {'Total':>10}")
    click.echo("-" * 74)
    for a in appointments:
        click.echo(
            f"{a.id:<6} {a.client_name:<20} "
            f"{a.start_time.astimezone(tz):%Y-%m-%d %H:%M} "
            f"{a.end_time.astimezone(tz):%Y-%m-%d %H:%M} {str(a.total):>10}"
        )
    click.echo(f"{len(appointments)} appointment(s)")


@click.command("show")
@click.option("--id", "appointment_id", required=True, type=int, help="Appointment ID.")
def appointment_show(appointment_id: int) -> None:
    """Show details of an appointment."""
    try:
        appt = appointment_service().get_by_id(appointment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_appointment(appt)


@click.command("update")
@click.option("--id", "appointment_id", required=True, type=int, help="Appointment ID.")
@_with_booking_options
def appointment_update(
    appointment_id: int, client: str, start: str, end: str, products: str | None
) -> None:
    """Reschedule an appointment (replaces client, times and products)."""
    request = _build_request(client, start, end, products)

    try:
        appt = appointment_service().update(appointment_id, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Appointment #{appt.id} updated.")
    _display_appointment(appt)


@click.command("cancel")
@click.option("--id", "appointment_id", required=True, type=int, help="Appointment ID.")
def appointment_cancel(appointment_id: int) -> None:
    """Cancel (delete) an appointment."""
    try:
        appointment_service().cancel(appointment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Appointment #{appointment_id} cancelled.")


@click.command("total")
@click.option("--id", "appointment_id", required=True, type=int, help="Appointment ID.")
def appointment_total(appointment_id: int) -> None:
    """Show the total price of an appointment."""
    try:
        total = appointment_service().get_total_price(appointment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Appointment #{appointment_id} total: {total}")
