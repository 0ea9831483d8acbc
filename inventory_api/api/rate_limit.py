import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from inventory_api.core.config import settings

logger = logging.getLogger(__name__)

# Per-client-address limit applied to every route by SlowAPIMiddleware.
# Storage is process-local; each worker enforces its own budget.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri="memory://",
    enabled=settings.RATE_LIMIT_ENABLED,
)

if not settings.RATE_LIMIT_ENABLED:
    logger.info("Rate limiting disabled (ENV=%s)", settings.ENV)
