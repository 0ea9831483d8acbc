"""
Product Service - CRUD operations for products.

Write failures are rolled back and reported as ``StoreError``; lookups of
missing or soft-deleted products raise ``ProductNotFoundError``.
"""
from __future__ import annotations

import datetime as dt
import logging
from typing import Sequence

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from inventory_api.core.exceptions import ProductNotFoundError, StoreError
from inventory_api.models.inventory_schemas import ProductCreate, ProductUpdate, StockStatus
from inventory_api.models.models import Product
from inventory_api.services.inventory.base import BaseInventoryService

logger = logging.getLogger(__name__)

LOW_STOCK_LEVEL = 5
CRITICAL_STOCK_LEVEL = 2


def stock_status(quantity: int) -> StockStatus:
    """Display status attached to every product response."""
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= CRITICAL_STOCK_LEVEL:
        return StockStatus.CRITICAL
    if quantity <= LOW_STOCK_LEVEL:
        return StockStatus.LOW
    return StockStatus.NORMAL


class ProductService(BaseInventoryService):
    """Service for product catalog operations."""

    def create_product(self, data: ProductCreate) -> Product:
        product = Product(
            name=data.name,
            description=data.description,
            quantity=data.quantity,
            price=data.price,
            category=data.category,
        )
        self._db.add(product)
        self._commit("create product")
        self._db.refresh(product)
        logger.info(f"Created product: {product.name} (id={product.id})")
        return product

    def get_product(self, product_id: int) -> Product:
        """Get a live product by ID."""
        product = self._live_products().filter(Product.id == product_id).first()
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_products(self) -> Sequence[Product]:
        return self._live_products().order_by(Product.id).all()

    def search_products(self, query: str) -> Sequence[Product]:
        """Case-insensitive substring match on name or description."""
        pattern = f"%{query}%"
        return (
            self._live_products()
            .filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
            .order_by(Product.id)
            .all()
        )

    def list_by_category(self, category: str) -> Sequence[Product]:
        return self._live_products().filter(Product.category == category).order_by(Product.id).all()

    def get_low_stock_products(self, threshold: int) -> Sequence[Product]:
        """Products with ``quantity < threshold``, fewest in stock first."""
        return (
            self._live_products()
            .filter(Product.quantity < threshold)
            .order_by(Product.quantity, Product.id)
            .all()
        )

    def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        """Replace every editable field of a product."""
        product = self.get_product(product_id)
        for key, value in data.model_dump().items():
            setattr(product, key, value)
        self._commit("update product")
        self._db.refresh(product)
        logger.info(f"Updated product: {product.name} (id={product.id})")
        return product

    def update_stock(self, product_id: int, quantity: int) -> Product:
        product = self.get_product(product_id)
        previous = product.quantity
        product.quantity = quantity
        self._commit("update stock")
        self._db.refresh(product)
        logger.info(f"Stock for product id={product.id} changed {previous} -> {quantity}")
        return product

    def delete_product(self, product_id: int) -> Product:
        """Soft delete a product."""
        product = self.get_product(product_id)
        product.deleted_at = dt.datetime.now(dt.timezone.utc)
        self._commit("delete product")
        logger.info(f"Deleted product: {product.name} (id={product.id})")
        return product

    def _commit(self, operation: str) -> None:
        try:
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error("Failed to %s: %s", operation, exc)
            raise StoreError(operation) from exc
