"""
Inventory Service Module.

The InventoryService class is a facade that composes the specialized
services behind one API.

Usage:
    from inventory_api.services.inventory import build_inventory_service

    service = build_inventory_service(db)

    product = service.create_product(data)
    products = service.list_products()
    low = service.get_low_stock_products(threshold=5)

    report = service.generate_alerts(threshold=5)
    stats = service.get_inventory_stats()
"""
from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from inventory_api.core.config import BaseAppSettings, settings
from inventory_api.models.inventory_schemas import InventoryStats, ProductCreate, ProductUpdate
from inventory_api.models.models import Product

from .alert_generator import AlertGenerator, AlertReport
from .alert_rules import classify, evaluate
from .analytics_service import InventoryAnalyticsService
from .product_service import ProductService, stock_status
from .store import ProductSnapshot, ProductStore, SqlProductStore


class InventoryService:
    """
    Facade for inventory operations.

    Composes the product, analytics and alert services; threshold defaults
    and alert tunables come from the settings object it is built with.
    """

    def __init__(self, db: Session, config: BaseAppSettings, store: ProductStore | None = None):
        self._db = db
        self._config = config

        self._products = ProductService(db)
        self._analytics = InventoryAnalyticsService(db)
        self._alerts = AlertGenerator(
            store or SqlProductStore(db),
            default_threshold=config.LOW_STOCK_DEFAULT_THRESHOLD,
            max_workers=config.ALERT_MAX_WORKERS,
            processing_delay=config.ALERT_PROCESSING_DELAY_MS / 1000,
            timeout=config.ALERT_TIMEOUT_SECONDS,
        )

    def normalize_threshold(self, threshold: int | None) -> int:
        """Apply the default for missing or non-positive thresholds."""
        return self._alerts.normalize_threshold(threshold)

    # ========================================================================
    # Product Operations (delegated to ProductService)
    # ========================================================================

    def create_product(self, data: ProductCreate) -> Product:
        return self._products.create_product(data)

    def get_product(self, product_id: int) -> Product:
        return self._products.get_product(product_id)

    def list_products(self, search: str | None = None, category: str | None = None) -> Sequence[Product]:
        """List products; a search term takes precedence over a category filter."""
        if search:
            return self._products.search_products(search)
        if category:
            return self._products.list_by_category(category)
        return self._products.list_products()

    def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        return self._products.update_product(product_id, data)

    def update_stock(self, product_id: int, quantity: int) -> Product:
        return self._products.update_stock(product_id, quantity)

    def delete_product(self, product_id: int) -> Product:
        return self._products.delete_product(product_id)

    def get_low_stock_products(self, threshold: int | None = None) -> tuple[Sequence[Product], int]:
        """Return (products below threshold, threshold actually used)."""
        threshold = self.normalize_threshold(threshold)
        return self._products.get_low_stock_products(threshold), threshold

    # ========================================================================
    # Alerts and Analytics
    # ========================================================================

    def generate_alerts(self, threshold: int | None = None) -> AlertReport:
        """Evaluate every live product concurrently against the threshold."""
        return self._alerts.generate(threshold)

    def get_inventory_stats(self) -> InventoryStats:
        return self._analytics.get_inventory_stats(self._config.LOW_STOCK_DEFAULT_THRESHOLD)


def build_inventory_service(db: Session, config: BaseAppSettings | None = None) -> InventoryService:
    """Factory function to create an InventoryService instance."""
    return InventoryService(db=db, config=config or settings)


__all__ = [
    "AlertGenerator",
    "AlertReport",
    "InventoryAnalyticsService",
    "InventoryService",
    "ProductService",
    "ProductSnapshot",
    "ProductStore",
    "SqlProductStore",
    "build_inventory_service",
    "classify",
    "evaluate",
    "stock_status",
]
