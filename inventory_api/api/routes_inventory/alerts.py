"""Stock alert endpoint."""
import logging

from fastapi import APIRouter

from inventory_api.api.dependencies import CurrentUserDep
from inventory_api.models import inventory_schemas as schemas
from .dependencies import InventoryServiceDep, ThresholdDep

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/products/alerts", response_model=schemas.AlertsOut)
def generate_alerts(
    current_user_id: CurrentUserDep,
    service: InventoryServiceDep,
    threshold: ThresholdDep,
):
    """Evaluate every product concurrently and return the low-stock alerts.

    A failed product read surfaces as a 500 through the StoreError handler;
    there is no partial result.
    """
    report = service.generate_alerts(threshold)
    logger.info(
        "user=%s generated %d alerts over %d products", current_user_id, report.total, report.evaluated
    )
    return schemas.AlertsOut(
        alerts=report.alerts,
        total=report.total,
        threshold=report.threshold,
    )
