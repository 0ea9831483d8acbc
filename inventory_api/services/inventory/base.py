"""
Base inventory service with shared functionality.

All inventory services share one database session, injected through the
constructor.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Query, Session

from inventory_api.models.models import Product

logger = logging.getLogger(__name__)


class BaseInventoryService:
    """Base service class holding the database session."""

    def __init__(self, db: Session):
        """
        Initialize the base inventory service.

        Args:
            db: SQLAlchemy database session
        """
        self._db = db

    def _live_products(self) -> Query:
        """Products that have not been soft-deleted."""
        return self._db.query(Product).filter(Product.deleted_at.is_(None))
