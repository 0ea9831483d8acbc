"""
Product store used by the alert generator.

The generator works on an immutable snapshot of the product table, taken
with one bulk read, so evaluation units never touch the database session.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import StoreError
from inventory_api.models.models import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductSnapshot:
    id: int
    name: str
    category: str
    quantity: int
    price: Decimal

    @classmethod
    def from_model(cls, product: Product) -> ProductSnapshot:
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            quantity=product.quantity,
            price=product.price,
        )


class ProductStore(Protocol):
    def fetch_all(self) -> list[ProductSnapshot]:
        """Return every live product; raise StoreError when the read fails."""
        ...


class SqlProductStore:
    """ProductStore backed by the SQLAlchemy session of the current request."""

    def __init__(self, db: Session):
        self._db = db

    def fetch_all(self) -> list[ProductSnapshot]:
        try:
            rows = (
                self._db.query(Product)
                .filter(Product.deleted_at.is_(None))
                .order_by(Product.id)
                .all()
            )
        except SQLAlchemyError as exc:
            logger.error("Product snapshot query failed: %s", exc)
            raise StoreError("fetch products") from exc
        return [ProductSnapshot.from_model(p) for p in rows]
