"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from barber.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product, assigning its ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Overwrite a stored product. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Raises EntityNotFoundError if absent."""
