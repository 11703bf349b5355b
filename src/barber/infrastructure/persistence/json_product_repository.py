"""JSON-file-backed implementation of ProductRepository.

The file holds ``{"next_id": N, "items": [...]}``. ``next_id`` only ever
grows, so the ID of a deleted product is never handed out again.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from barber.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from barber.domain.model.product import Product
from barber.domain.model.value_objects import Money
from barber.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        next_id, products = self._load()
        product.id = next_id
        products[product.id] = product
        self._persist(next_id + 1, products)
        return product

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load()[1].get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load()[1].values())

    def update(self, product: Product) -> None:
        next_id, products = self._load()
        if product.id not in products:
            raise EntityNotFoundError(f"Product #{product.id} not found")
        products[product.id] = product
        self._persist(next_id, products)

    def delete(self, product_id: int) -> None:
        next_id, products = self._load()
        if products.pop(product_id, None) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self._persist(next_id, products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> tuple[int, dict[int, Product]]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = {
                item["id"]: Product(
                    id=item["id"],
                    name=item["name"],
                    price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                    description=item.get("description", ""),
                    created_at=datetime.fromisoformat(item["created_at"]),
                    updated_at=datetime.fromisoformat(item["updated_at"]),
                )
                for item in raw["items"]
            }
            next_id = max(int(raw["next_id"]), max(products, default=0) + 1)
            return next_id, products
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise PersistenceError(f"Corrupt product data in {self._file_path}") from exc

    def _persist(self, next_id: int, products: dict[int, Product]) -> None:
        items = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "description": p.description,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat(),
            }
            for p in products.values()
        ]
        self._write({"next_id": next_id, "items": items})

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
