import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from inventory_api import metrics
from inventory_api.api.rate_limit import limiter
from inventory_api.api.routes_auth import router as auth_router
from inventory_api.api.routes_health import router as health_router
from inventory_api.api.routes_inventory import router as inventory_router
from inventory_api.api.routes_metrics import router as metrics_router
from inventory_api.core.config import settings
from inventory_api.core.errors import register_error_handlers
from inventory_api.core.logger import init_logging
from inventory_api.core.monitoring import init_monitoring
from inventory_api.db.session import init_db

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


async def _rate_limit_handler(request, exc: RateLimitExceeded):
    metrics.rate_limited()
    return JSONResponse(status_code=429, content={"detail": "Too many requests"})


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):  # type: ignore[override]
        response = await call_next(request)
        response.headers.setdefault(
            "Strict-Transport-Security",
            f"max-age={settings.HSTS_SECONDS}; includeSubDomains",
        )
        response.headers.setdefault("Referrer-Policy", "same-origin")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Content-Security-Policy", settings.CONTENT_SECURITY_POLICY)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started (env=%s)", settings.APP_NAME, settings.VERSION, settings.ENV)
    yield


def create_app() -> FastAPI:
    init_logging()
    init_monitoring()

    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
        lifespan=lifespan,
    )
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    register_error_handlers(app)

    # Same surface at the root and under the versioned prefix
    for prefix in ("", API_PREFIX):
        app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["auth"])
        app.include_router(inventory_router, prefix=prefix, tags=["products"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(health_router)

    return app


app = create_app()
