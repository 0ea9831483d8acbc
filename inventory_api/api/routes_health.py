from __future__ import annotations

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from inventory_api.api.dependencies import DbDep
from inventory_api.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe (no dependencies)."""
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.VERSION}


@router.get("/healthz")
def healthz(db: DbDep) -> dict[str, str]:
    """Readiness probe: the database must answer a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(status_code=503, detail="Database connectivity check failed") from exc
    return {"status": "ok"}
