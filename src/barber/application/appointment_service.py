"""Application service: appointment booking use cases.

Every write runs its checks in a fixed order and raises the first
failure it meets:

1. field checks (client name, start not in the past, end after start)
2. overlap against stored appointments
3. product resolution against the catalog
4. persistence

Products are copied into the appointment as snapshots, so later catalog
edits never rewrite booking history.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from barber.application.dto import AppointmentRequest
from barber.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from barber.domain.model.appointment import Appointment, validate_client_name
from barber.domain.model.product import ProductSnapshot
from barber.domain.model.value_objects import Money, TimeSlot
from barber.domain.repository.appointment_repository import AppointmentRepository
from barber.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentService:

    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        product_repo: ProductRepository,
        clock: Clock | None = None,
    ) -> None:
        self._appointment_repo = appointment_repo
        self._product_repo = product_repo
        self._clock = clock or _utcnow

    # --- Commands -------------------------------------------------------------

    def schedule(self, request: AppointmentRequest) -> Appointment:
        """Book a new appointment and return it with its assigned ID."""
        client_name = validate_client_name(request.client_name)
        slot = self._validated_slot(request.start_time, request.end_time)

        self._ensure_slot_free(slot)
        products = self._resolve_products(request.product_ids)

        appointment = Appointment.propose(client_name, slot, products)
        stored = self._appointment_repo.create(appointment)
        logger.info(
            "Scheduled appointment #%s for %s at %s", stored.id, stored.client_name, slot
        )
        return stored

    def update(self, appointment_id: int, request: AppointmentRequest) -> Appointment:
        """Replace an appointment's client, slot and products.

        The ID never changes. Overlap with the appointment's own previous
        slot is not a conflict.
        """
        existing = self.get_by_id(appointment_id)

        client_name = validate_client_name(request.client_name)
        slot = self._validated_slot(request.start_time, request.end_time)

        self._ensure_slot_free(slot, exclude_id=appointment_id)
        products = self._resolve_products(request.product_ids)

        updated = Appointment(
            id=existing.id,
            client_name=client_name,
            slot=slot,
            products=products,
            created_at=existing.created_at,
            updated_at=self._clock(),
        )
        self._appointment_repo.update(updated)
        logger.info("Rescheduled appointment #%s to %s", appointment_id, slot)
        return updated

    def cancel(self, appointment_id: int) -> None:
        """Delete an appointment. Cancelled appointments are gone for good."""
        self.get_by_id(appointment_id)
        self._appointment_repo.delete(appointment_id)
        logger.info("Cancelled appointment #%s", appointment_id)

    # --- Queries --------------------------------------------------------------

    def get_by_id(self, appointment_id: int) -> Appointment:
        appointment = self._appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundError(f"Appointment #{appointment_id} not found")
        return appointment

    def list_all(self) -> list[Appointment]:
        return self._appointment_repo.list_all()

    def get_total_price(self, appointment_id: int) -> Money:
        """Sum of the snapshot prices on the appointment; $0.00 if none."""
        return self.get_by_id(appointment_id).total

    # --- Internal helpers -----------------------------------------------------

    def _validated_slot(self, start: datetime, end: datetime) -> TimeSlot:
        if not isinstance(start, datetime):
            raise ValidationError("Start time must be a datetime")
        if start.tzinfo is None or start.utcoffset() is None:
            raise ValidationError("Start time must be timezone-aware")
        if start < self._clock():
            raise ValidationError("Appointment cannot start in the past")
        return TimeSlot(start, end)

    def _ensure_slot_free(self, slot: TimeSlot, exclude_id: int | None = None) -> None:
        clashes = self._appointment_repo.list_overlapping(slot, exclude_id=exclude_id)
        if clashes:
            ids = ", ".join(f"#{a.id}" for a in clashes)
            logger.warning("Rejected slot %s: overlaps appointment %s", slot, ids)
            raise ConflictError(f"Time slot overlaps existing appointment {ids}")

    def _resolve_products(self, product_ids: list[int]) -> list[ProductSnapshot]:
        snapshots: list[ProductSnapshot] = []
        for product_id in product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product not found: #{product_id}")
            snapshots.append(product.snapshot())
        return snapshots
