"""Low-stock listing and statistics endpoints."""
import logging

from fastapi import APIRouter

from inventory_api.models import inventory_schemas as schemas
from .dependencies import InventoryServiceDep, ThresholdDep
from .helpers import product_to_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/products/low-stock", response_model=schemas.LowStockOut)
def get_low_stock_products(service: InventoryServiceDep, threshold: ThresholdDep):
    """Products whose quantity is below the threshold."""
    products, used_threshold = service.get_low_stock_products(threshold)
    return schemas.LowStockOut(
        products=[product_to_out(p) for p in products],
        total=len(products),
        threshold=used_threshold,
    )


@router.get("/products/stats", response_model=schemas.StatsOut)
def get_inventory_stats(service: InventoryServiceDep):
    """Inventory summary statistics for dashboards."""
    return schemas.StatsOut(stats=service.get_inventory_stats())
