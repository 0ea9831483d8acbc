"""Helper functions for inventory routes."""
from inventory_api.models import inventory_schemas as schemas
from inventory_api.services.inventory import stock_status


def product_to_out(product) -> schemas.ProductOut:
    """Convert Product model to ProductOut schema."""
    return schemas.ProductOut(
        id=product.id,
        name=product.name,
        description=product.description or "",
        quantity=product.quantity,
        price=product.price,
        category=product.category,
        created_at=product.created_at,
        updated_at=product.updated_at,
        stock_status=stock_status(product.quantity),
    )
