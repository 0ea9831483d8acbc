import logging

from inventory_api.core.config import settings

_initialized = False


def init_monitoring() -> None:
    global _initialized
    if _initialized:
        return
    dsn = settings.SENTRY_DSN
    if dsn:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration

        sentry_sdk.init(
            dsn=dsn,
            integrations=[FastApiIntegration()],
            traces_sample_rate=0.1,
            environment=settings.ENV,
            release=f"{settings.APP_NAME}@{settings.VERSION}",
        )
        logging.getLogger(__name__).info("Sentry initialized")
    _initialized = True
