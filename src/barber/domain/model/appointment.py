"""Appointment aggregate — the core of the domain.

An appointment books one client into a time slot and owns value copies
of the products it was booked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from barber.domain.exceptions import ValidationError
from barber.domain.model.product import ProductSnapshot
from barber.domain.model.value_objects import Money, TimeSlot


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Appointment:
    """Aggregate root for bookings.

    Use ``Appointment.propose()`` to build a candidate from client input.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute stored appointments without re-validating.
    """

    id: int | None
    client_name: str
    slot: TimeSlot
    products: list[ProductSnapshot] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def propose(
        client_name: str,
        slot: TimeSlot,
        products: list[ProductSnapshot],
    ) -> Appointment:
        """Build an unsaved candidate appointment."""
        return Appointment(
            id=None,
            client_name=validate_client_name(client_name),
            slot=slot,
            products=list(products),
        )

    # --- Queries --------------------------------------------------------------

    @property
    def start_time(self) -> datetime:
        return self.slot.start

    @property
    def end_time(self) -> datetime:
        return self.slot.end

    def overlaps(self, other: Appointment) -> bool:
        return self.slot.overlaps(other.slot)

    @property
    def total(self) -> Money:
        if not self.products:
            return Money.zero()
        result = Money.zero(self.products[0].price.currency)
        for product in self.products:
            result = result + product.price
        return result


def validate_client_name(client_name: str) -> str:
    """Return the trimmed client name, rejecting blanks."""
    if not client_name or not client_name.strip():
        raise ValidationError("Client name is required")
    return client_name.strip()
