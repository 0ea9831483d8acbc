"""Tests for stock alert classification."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from inventory_api.models.inventory_schemas import AlertSeverity
from inventory_api.services.inventory.alert_rules import (
    BELOW_THRESHOLD_MESSAGE,
    CRITICAL_LEVEL_MESSAGE,
    OUT_OF_STOCK_MESSAGE,
    classify,
    evaluate,
)
from inventory_api.services.inventory.store import ProductSnapshot


def _product(quantity: int, product_id: int = 1) -> ProductSnapshot:
    return ProductSnapshot(
        id=product_id,
        name=f"Item {product_id}",
        category="Electronics",
        quantity=quantity,
        price=Decimal("9.99"),
    )


class TestClassify:
    @pytest.mark.parametrize(
        "quantity,threshold,expected",
        [
            (0, 5, (AlertSeverity.CRITICAL, OUT_OF_STOCK_MESSAGE)),
            (1, 5, (AlertSeverity.HIGH, CRITICAL_LEVEL_MESSAGE)),
            (2, 5, (AlertSeverity.HIGH, CRITICAL_LEVEL_MESSAGE)),
            (3, 5, (AlertSeverity.LOW, BELOW_THRESHOLD_MESSAGE)),
            (4, 5, (AlertSeverity.LOW, BELOW_THRESHOLD_MESSAGE)),
            (5, 5, None),
            (50, 5, None),
        ],
    )
    def test_bands_at_default_threshold(self, quantity, threshold, expected):
        assert classify(quantity, threshold) == expected

    def test_threshold_is_exclusive(self):
        assert classify(10, 10) is None
        assert classify(9, 10) == (AlertSeverity.LOW, BELOW_THRESHOLD_MESSAGE)

    def test_out_of_stock_wins_over_critical_level(self):
        # 0 is also <= 2; the out-of-stock band must be checked first
        assert classify(0, 1) == (AlertSeverity.CRITICAL, OUT_OF_STOCK_MESSAGE)

    def test_small_threshold_still_uses_critical_band(self):
        assert classify(1, 2) == (AlertSeverity.HIGH, CRITICAL_LEVEL_MESSAGE)
        assert classify(2, 2) is None


class TestEvaluate:
    def test_no_alert_when_stock_sufficient(self):
        assert evaluate(_product(15), 5) is None

    def test_below_threshold_alert(self):
        alert = evaluate(_product(3, product_id=11), 5)
        assert alert is not None
        assert alert.product_id == 11
        assert alert.name == "Item 11"
        assert alert.category == "Electronics"
        assert alert.quantity == 3
        assert alert.threshold == 5
        assert alert.severity == AlertSeverity.LOW
        assert alert.message == "Stock below threshold"

    def test_critical_level_alert(self):
        alert = evaluate(_product(2), 5)
        assert alert.severity == AlertSeverity.HIGH
        assert alert.message == "Critical stock level"

    def test_out_of_stock_alert(self):
        alert = evaluate(_product(0), 5)
        assert alert.severity == AlertSeverity.CRITICAL
        assert alert.message == "Product out of stock"

    def test_timestamp_is_timezone_aware(self):
        alert = evaluate(_product(1), 5)
        assert alert.generated_at.tzinfo is not None

    def test_repeated_evaluation_differs_only_in_timestamp(self):
        first = evaluate(_product(4), 5)
        second = evaluate(_product(4), 5)
        assert first.model_dump(exclude={"generated_at"}) == second.model_dump(exclude={"generated_at"})

    def test_alert_is_immutable(self):
        alert = evaluate(_product(0), 5)
        with pytest.raises(ValidationError):
            alert.quantity = 10
