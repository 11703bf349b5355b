"""Product aggregate.

Products live independently of appointments. They have their own lifecycle:
prices change, services are added to and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from barber.domain.exceptions import ValidationError
from barber.domain.model.value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductSnapshot:
    """Copy of a product's details as they were when an appointment was booked.

    Appointments own their snapshots. Editing or deleting the catalog
    product afterwards leaves them untouched.
    """

    product_id: int
    name: str
    price: Money
    description: str = ""


@dataclass
class Product:
    """A product or service in the catalog.

    Use ``Product.create()`` for new products. The plain constructor
    lets repositories reconstitute stored products without re-validating.
    """

    id: int | None
    name: str
    price: Money
    description: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(name: str, price: Money, description: str = "") -> Product:
        validate_details(name, price)
        return Product(id=None, name=name, price=price, description=description or "")

    # --- Mutations ------------------------------------------------------------

    def update_details(self, name: str, price: Money, description: str = "") -> None:
        """Replace name, price and description.

        This does NOT affect any existing appointments because they
        hold a snapshot taken at booking time.
        """
        validate_details(name, price)
        self.name = name
        self.price = price
        self.description = description or ""
        self.updated_at = _utcnow()

    def snapshot(self) -> ProductSnapshot:
        if self.id is None:
            raise ValidationError(f"Product '{self.name}' has not been stored yet")
        return ProductSnapshot(
            product_id=self.id,
            name=self.name,
            price=self.price,
            description=self.description,
        )


def validate_details(name: str, price: Money) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
