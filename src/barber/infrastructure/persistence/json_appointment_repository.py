"""JSON-file-backed implementation of AppointmentRepository.

The file holds ``{"next_id": N, "items": [...]}``. IDs come from
``next_id``, which never goes down, so a cancelled appointment's ID is
not reused.

Writes hold a lock across the whole read-modify-write of the file and
re-check for overlapping slots inside it, so two bookings racing for
the same time cannot both be stored.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from barber.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from barber.domain.model.appointment import Appointment
from barber.domain.model.product import ProductSnapshot
from barber.domain.model.value_objects import Money, TimeSlot
from barber.domain.repository.appointment_repository import AppointmentRepository

logger = logging.getLogger(__name__)


class JsonAppointmentRepository(AppointmentRepository):

    _write_lock = threading.Lock()

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- AppointmentRepository interface --------------------------------------

    def create(self, appointment: Appointment) -> Appointment:
        with self._write_lock:
            next_id, appointments = self._load()
            self._assert_no_overlap(appointments, appointment)

            appointment.id = next_id
            appointments.append(appointment)
            self._persist(next_id + 1, appointments)
        return appointment

    def get_by_id(self, appointment_id: int) -> Appointment | None:
        for appointment in self._load()[1]:
            if appointment.id == appointment_id:
                return appointment
        return None

    def list_all(self) -> list[Appointment]:
        return self._load()[1]

    def update(self, appointment: Appointment) -> None:
        with self._write_lock:
            next_id, appointments = self._load()
            self._assert_no_overlap(appointments, appointment)

            for i, stored in enumerate(appointments):
                if stored.id == appointment.id:
                    appointments[i] = appointment
                    break
            else:
                raise EntityNotFoundError(f"Appointment #{appointment.id} not found")
            self._persist(next_id, appointments)

    def delete(self, appointment_id: int) -> None:
        with self._write_lock:
            next_id, appointments = self._load()
            remaining = [a for a in appointments if a.id != appointment_id]
            if len(remaining) == len(appointments):
                raise EntityNotFoundError(f"Appointment #{appointment_id} not found")
            self._persist(next_id, remaining)

    # --- Guard ----------------------------------------------------------------

    @staticmethod
    def _assert_no_overlap(
        appointments: list[Appointment], candidate: Appointment
    ) -> None:
        for stored in appointments:
            if stored.id != candidate.id and stored.overlaps(candidate):
                logger.warning(
                    "Write rejected: slot %s taken by appointment #%s since it was checked",
                    candidate.slot,
                    stored.id,
                )
                raise ConflictError(
                    f"Time slot overlaps existing appointment #{stored.id}"
                )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(appointment: Appointment) -> dict:
        return {
            "id": appointment.id,
            "client_name": appointment.client_name,
            "start_time": appointment.start_time.isoformat(),
            "end_time": appointment.end_time.isoformat(),
            "created_at": appointment.created_at.isoformat(),
            "updated_at": appointment.updated_at.isoformat(),
            "products": [
                {
                    "product_id": p.product_id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "description": p.description,
                }
                for p in appointment.products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Appointment:
        products = [
            ProductSnapshot(
                product_id=p["product_id"],
                name=p["name"],
                price=Money(Decimal(p["price"]), p.get("currency", "USD")),
                description=p.get("description", ""),
            )
            for p in raw["products"]
        ]
        return Appointment(
            id=raw["id"],
            client_name=raw["client_name"],
            slot=TimeSlot(
                datetime.fromisoformat(raw["start_time"]),
                datetime.fromisoformat(raw["end_time"]),
            ),
            products=products,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> tuple[int, list[Appointment]]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            appointments = [self._to_domain(item) for item in raw["items"]]
            highest = max((a.id for a in appointments), default=0)
            return max(int(raw["next_id"]), highest + 1), appointments
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise PersistenceError(
                f"Corrupt appointment data in {self._file_path}"
            ) from exc

    def _persist(self, next_id: int, appointments: list[Appointment]) -> None:
        self._write(
            {"next_id": next_id, "items": [self._to_raw(a) for a in appointments]}
        )

    def _write(self, document: dict) -> None:
        try:
            self._file_path.write_text(
                json.dumps(document, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(
                f"Cannot create data directory {self._file_path.parent}: {exc}"
            ) from exc
        self._write({"next_id": 1, "items": []})
