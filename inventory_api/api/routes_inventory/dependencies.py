"""Common dependencies for inventory routes."""
from typing import Annotated, TypeAlias

from fastapi import Depends, Query

from inventory_api.api.dependencies import DbDep
from inventory_api.core.config import settings
from inventory_api.services.inventory import InventoryService, build_inventory_service

# Largest value a BIGINT column or bound parameter can carry
MAX_THRESHOLD = 2**63 - 1


def get_inventory_service(db: DbDep) -> InventoryService:
    return build_inventory_service(db, settings)


def get_threshold(
    threshold: str | None = Query(None, description="Stock threshold (default: 5)"),
) -> int | None:
    """Parse the ``threshold`` query parameter leniently.

    Missing, non-integer, out-of-range and non-positive values all map to
    None so the service falls back to its default instead of rejecting the
    request.
    """
    if threshold is None:
        return None
    try:
        value = int(threshold)
    except ValueError:
        return None
    if value <= 0 or value > MAX_THRESHOLD:
        return None
    return value


InventoryServiceDep: TypeAlias = Annotated[InventoryService, Depends(get_inventory_service)]
ThresholdDep: TypeAlias = Annotated[int | None, Depends(get_threshold)]
