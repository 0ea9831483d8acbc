"""Product endpoints."""
import logging

from fastapi import APIRouter, Query

from inventory_api import metrics
from inventory_api.api.dependencies import CurrentUserDep
from inventory_api.core.audit import log_audit_event
from inventory_api.models import inventory_schemas as schemas
from inventory_api.models.schemas import MessageOut
from .dependencies import InventoryServiceDep
from .helpers import product_to_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/products", response_model=schemas.ProductListOut)
def list_products(
    service: InventoryServiceDep,
    search: str | None = Query(None, description="Search by name or description"),
    category: str | None = Query(None, description="Filter by category"),
):
    """List products, optionally searched or filtered by category."""
    products = service.list_products(search=search, category=category)
    return schemas.ProductListOut(
        products=[product_to_out(p) for p in products],
        total=len(products),
    )


@router.post("/products", response_model=schemas.ProductEnvelope, status_code=201)
def create_product(
    data: schemas.ProductCreate,
    current_user_id: CurrentUserDep,
    service: InventoryServiceDep,
):
    """Create a new product."""
    product = service.create_product(data)
    metrics.product_created()
    log_audit_event("product.create", user_id=current_user_id, product_id=product.id)
    return schemas.ProductEnvelope(message="Product created successfully", product=product_to_out(product))


@router.get("/products/{product_id}", response_model=schemas.ProductEnvelope)
def get_product(product_id: int, service: InventoryServiceDep):
    """Get a product by ID."""
    return schemas.ProductEnvelope(product=product_to_out(service.get_product(product_id)))


@router.put("/products/{product_id}", response_model=schemas.ProductEnvelope)
def update_product(
    product_id: int,
    data: schemas.ProductUpdate,
    current_user_id: CurrentUserDep,
    service: InventoryServiceDep,
):
    """Replace a product's editable fields."""
    product = service.update_product(product_id, data)
    log_audit_event("product.update", user_id=current_user_id, product_id=product.id)
    return schemas.ProductEnvelope(message="Product updated successfully", product=product_to_out(product))


@router.delete("/products/{product_id}", response_model=MessageOut)
def delete_product(
    product_id: int,
    current_user_id: CurrentUserDep,
    service: InventoryServiceDep,
):
    """Delete a product (soft delete)."""
    service.delete_product(product_id)
    metrics.product_deleted()
    log_audit_event("product.delete", user_id=current_user_id, product_id=product_id)
    return MessageOut(message="Product deleted successfully")


@router.put("/products/{product_id}/stock", response_model=schemas.ProductEnvelope)
def update_stock(
    product_id: int,
    data: schemas.StockUpdate,
    current_user_id: CurrentUserDep,
    service: InventoryServiceDep,
):
    """Set the stock count of a product."""
    product = service.update_stock(product_id, data.quantity)
    log_audit_event("product.stock", user_id=current_user_id, product_id=product.id, quantity=data.quantity)
    return schemas.ProductEnvelope(message="Stock updated successfully", product=product_to_out(product))
