import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from inventory_api.core.exceptions import InventoryException

logger = logging.getLogger("inventory_api.errors")


def register_error_handlers(app):
    @app.exception_handler(InventoryException)
    async def inventory_exception(request: Request, exc: InventoryException):
        if exc.status_code >= 500:
            logger.error(
                "%s code=%s path=%s method=%s",
                exc.message,
                exc.code,
                request.url.path,
                request.method,
                exc_info=exc.__cause__ or exc,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        return JSONResponse(status_code=500, content={"detail": "Internal server error", "cid": correlation_id})

    return app
