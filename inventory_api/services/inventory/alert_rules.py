"""
Stock alert classification.

``evaluate`` is a pure function of the product and the threshold it is
handed (apart from the timestamp); threshold defaulting is the caller's job.
"""
from __future__ import annotations

import datetime as dt
from typing import Protocol

from inventory_api.models.inventory_schemas import AlertSeverity, ProductAlert

# Quantities at or below this level (but above zero) are escalated to HIGH
CRITICAL_STOCK_LEVEL = 2

OUT_OF_STOCK_MESSAGE = "Product out of stock"
CRITICAL_LEVEL_MESSAGE = "Critical stock level"
BELOW_THRESHOLD_MESSAGE = "Stock below threshold"


class StockedItem(Protocol):
    id: int
    name: str
    category: str
    quantity: int


def classify(quantity: int, threshold: int) -> tuple[AlertSeverity, str] | None:
    """Map a stock count to (severity, message), or None when stock is sufficient.

    Bands are checked in a fixed order: out of stock, then the critical level,
    then the general below-threshold case.
    """
    if quantity >= threshold:
        return None
    if quantity == 0:
        return AlertSeverity.CRITICAL, OUT_OF_STOCK_MESSAGE
    if quantity <= CRITICAL_STOCK_LEVEL:
        return AlertSeverity.HIGH, CRITICAL_LEVEL_MESSAGE
    return AlertSeverity.LOW, BELOW_THRESHOLD_MESSAGE


def evaluate(product: StockedItem, threshold: int) -> ProductAlert | None:
    """Build the alert for ``product`` at ``threshold``, if one is due."""
    band = classify(product.quantity, threshold)
    if band is None:
        return None
    severity, message = band
    return ProductAlert(
        product_id=product.id,
        name=product.name,
        category=product.category,
        quantity=product.quantity,
        threshold=threshold,
        severity=severity,
        message=message,
        generated_at=dt.datetime.now(dt.timezone.utc),
    )
