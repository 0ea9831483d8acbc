"""
Inventory API Routes.

- Analytics (low-stock listing, stats)
- Alerts (concurrent low-stock alert generation)
- Products (CRUD, search, stock updates)

The fixed-path routers are included before the products router so that
``/products/alerts`` and friends are not captured by ``/products/{product_id}``.
"""
from fastapi import APIRouter

from .alerts import router as alerts_router
from .analytics import router as analytics_router
from .products import router as products_router

router = APIRouter()
router.include_router(analytics_router)
router.include_router(alerts_router)
router.include_router(products_router)

__all__ = ["router"]
