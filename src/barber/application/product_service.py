"""Application service: product catalog use cases."""

from __future__ import annotations

import logging

from barber.application.dto import ProductRequest
from barber.domain.exceptions import ConflictError, EntityNotFoundError
from barber.domain.model.product import Product, validate_details
from barber.domain.model.value_objects import Money
from barber.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create(self, request: ProductRequest) -> Product:
        """Add a new product to the catalog.

        Names are compared exactly (case-sensitive, no trimming).
        """
        product = Product.create(
            name=request.name,
            price=Money.of(request.price),
            description=request.description,
        )

        self._ensure_name_free(product.name)

        stored = self._product_repo.create(product)
        logger.info("Created product #%s '%s' at %s", stored.id, stored.name, stored.price)
        return stored

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_by_id(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def update(self, product_id: int, request: ProductRequest) -> Product:
        """Replace a product's name, price and description.

        Existing appointments keep the snapshot they were booked with.
        """
        price = Money.of(request.price)
        validate_details(request.name, price)

        product = self.get_by_id(product_id)
        self._ensure_name_free(request.name, exclude_id=product_id)

        product.update_details(request.name, price, request.description)
        self._product_repo.update(product)
        logger.info("Updated product #%s", product_id)
        return product

    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog.

        Appointments that already embed a snapshot of it are unaffected,
        but it can no longer be booked.
        """
        self.get_by_id(product_id)
        self._product_repo.delete(product_id)
        logger.info("Deleted product #%s", product_id)

    # --- Internal helpers -----------------------------------------------------

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        for existing in self._product_repo.list_all():
            if existing.name == name and existing.id != exclude_id:
                logger.warning("Rejected duplicate product name '%s'", name)
                raise ConflictError(f"Product '{name}' already exists")
