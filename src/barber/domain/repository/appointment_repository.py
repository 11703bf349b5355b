"""Abstract repository for Appointment aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from barber.domain.model.appointment import Appointment
from barber.domain.model.value_objects import TimeSlot


class AppointmentRepository(ABC):

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        """Persist a new appointment, assigning its ID."""

    @abstractmethod
    def get_by_id(self, appointment_id: int) -> Appointment | None:
        """Return an appointment by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Appointment]:
        """Return every stored appointment, in insertion order."""

    @abstractmethod
    def update(self, appointment: Appointment) -> None:
        """Overwrite a stored appointment. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def delete(self, appointment_id: int) -> None:
        """Remove an appointment. Raises EntityNotFoundError if absent."""

    def list_overlapping(
        self,
        slot: TimeSlot,
        exclude_id: int | None = None,
    ) -> list[Appointment]:
        """Return stored appointments whose slot overlaps *slot*.

        The default is a linear scan over ``list_all()``. Backends with
        a range index should override this; the result must be the same.
        """
        return [
            appt
            for appt in self.list_all()
            if appt.id != exclude_id and appt.slot.overlaps(slot)
        ]
