"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry client input from the CLI into the application services
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ProductRequest:
    """Input: the fields a client submits to create or edit a product."""

    name: str
    price: str  # parsed into Money by the service, e.g. "20.00"
    description: str = ""


@dataclass(frozen=True)
class AppointmentRequest:
    """Input: a booking request with bare product IDs still to be resolved."""

    client_name: str
    start_time: datetime
    end_time: datetime
    product_ids: list[int] = field(default_factory=list)
