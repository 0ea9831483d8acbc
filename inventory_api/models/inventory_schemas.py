"""
Pydantic schemas for the inventory API.

Request bodies carry the validation rules for products; the response
envelopes mirror the JSON shape clients of the service already rely on
(``{"product": ...}``, ``{"products": [...], "total": n}``, ...).
"""
from __future__ import annotations

import datetime as dt
import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# Product Schemas
# ============================================================================

class ProductCreate(BaseModel):
    """Schema for creating a product."""
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(default="", max_length=500)
    quantity: int = Field(..., ge=0)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=2, max_length=50)


class ProductUpdate(ProductCreate):
    """Schema for updating a product (full replacement of editable fields)."""


class StockUpdate(BaseModel):
    """Schema for replacing only the stock count of a product."""
    quantity: int = Field(..., ge=0)


class StockStatus(str, enum.Enum):
    OUT_OF_STOCK = "out_of_stock"
    CRITICAL = "critical"
    LOW = "low"
    NORMAL = "normal"


class ProductOut(BaseModel):
    """Schema for product API response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str = ""
    quantity: int
    price: Decimal
    category: str
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    stock_status: StockStatus


class ProductEnvelope(BaseModel):
    message: str | None = None
    product: ProductOut


class ProductListOut(BaseModel):
    products: list[ProductOut]
    total: int


class LowStockOut(ProductListOut):
    threshold: int


# ============================================================================
# Alert Schemas
# ============================================================================

class AlertSeverity(str, enum.Enum):
    """Severity bands for a low-stock alert, most urgent last."""
    LOW = "low"
    HIGH = "high"
    CRITICAL = "critical"


class ProductAlert(BaseModel):
    """Low-stock alert for a single product, computed on demand and never stored."""
    model_config = ConfigDict(frozen=True)

    product_id: int
    name: str
    category: str
    quantity: int
    threshold: int
    severity: AlertSeverity
    message: str
    generated_at: dt.datetime


class AlertsOut(BaseModel):
    alerts: list[ProductAlert]
    total: int
    threshold: int
    message: str = "Alerts generated using concurrent processing"


# ============================================================================
# Statistics Schemas
# ============================================================================

class InventoryStats(BaseModel):
    """Summary stats for the inventory dashboard."""
    total_products: int = 0
    total_value: Decimal = Decimal("0")
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    categories: list[str] = Field(default_factory=list)
    categories_count: int = 0


class StatsOut(BaseModel):
    stats: InventoryStats
