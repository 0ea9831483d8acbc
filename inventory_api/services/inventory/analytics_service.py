"""
Inventory Analytics Service.

Aggregate statistics over the live (non-deleted) product table.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func

from inventory_api.models.inventory_schemas import InventoryStats
from inventory_api.models.models import Product
from .base import BaseInventoryService

logger = logging.getLogger(__name__)


class InventoryAnalyticsService(BaseInventoryService):
    """Service for inventory statistics."""

    def get_inventory_stats(self, low_stock_threshold: int = 5) -> InventoryStats:
        """Get summary statistics for the inventory dashboard."""
        categories = self._list_categories()
        return InventoryStats(
            total_products=self._count(),
            total_value=self._total_value(),
            low_stock_count=self._count(Product.quantity < low_stock_threshold),
            out_of_stock_count=self._count(Product.quantity == 0),
            categories=categories,
            categories_count=len(categories),
        )

    # ========================================================================
    # Private Helpers
    # ========================================================================

    def _count(self, *criteria) -> int:
        query = self._db.query(func.count(Product.id)).filter(Product.deleted_at.is_(None))
        if criteria:
            query = query.filter(*criteria)
        return query.scalar() or 0

    def _total_value(self) -> Decimal:
        value = (
            self._db.query(func.sum(Product.price * Product.quantity))
            .filter(Product.deleted_at.is_(None))
            .scalar()
        )
        if value is None:
            return Decimal("0.00")
        return Decimal(str(value)).quantize(Decimal("0.01"))

    def _list_categories(self) -> list[str]:
        rows = (
            self._db.query(Product.category)
            .filter(Product.deleted_at.is_(None))
            .distinct()
            .order_by(Product.category)
            .all()
        )
        return [row[0] for row in rows]
