"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from barber.application.appointment_service import AppointmentService
from barber.application.product_service import ProductService
from barber.infrastructure import config
from barber.infrastructure.persistence.json_appointment_repository import (
    JsonAppointmentRepository,
)
from barber.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(config.data_dir() / "products.json")


def appointment_repository() -> JsonAppointmentRepository:
    return JsonAppointmentRepository(config.data_dir() / "appointments.json")


def product_service() -> ProductService:
    return ProductService(product_repository())


def appointment_service() -> AppointmentService:
    return AppointmentService(appointment_repository(), product_repository())
