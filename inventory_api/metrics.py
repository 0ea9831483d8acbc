"""Metrics facade.

Service code should ONLY call the semantic helpers here so the backend can
change freely. Metrics live in the default Prometheus registry and are
exposed by ``/metrics``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from prometheus_client import Counter, Histogram

logger = logging.getLogger("metrics")

_PRODUCTS_CREATED = Counter("inventory_products_created_total", "Products successfully created")
_PRODUCTS_DELETED = Counter("inventory_products_deleted_total", "Products soft-deleted")
_USERS_REGISTERED = Counter("inventory_users_registered_total", "User accounts registered")
_LOGINS = Counter("inventory_logins_total", "Login attempts by outcome", ["outcome"])
_RATE_LIMITED = Counter("inventory_rate_limit_exceeded_total", "Requests rejected by the rate limiter")
_ALERT_RUNS = Counter("inventory_alert_runs_total", "Alert generation runs completed")
_PRODUCTS_EVALUATED = Counter(
    "inventory_alert_products_evaluated_total", "Products evaluated by the alert generator"
)
_ALERTS_GENERATED = Counter(
    "inventory_alerts_generated_total", "Low-stock alerts produced", ["severity"]
)
_ALERT_GENERATION_LATENCY = Histogram(
    "inventory_alert_generation_seconds",
    "Wall-clock duration of one alert generation run (fan-out through drain)",
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30),
)


def product_created() -> None:
    _PRODUCTS_CREATED.inc()


def product_deleted() -> None:
    _PRODUCTS_DELETED.inc()


def user_registered() -> None:
    _USERS_REGISTERED.inc()


def login_succeeded() -> None:
    _LOGINS.labels(outcome="success").inc()


def login_failed() -> None:
    _LOGINS.labels(outcome="failure").inc()


def alerts_generated(severities: Iterable[str], evaluated: int) -> None:
    """Record one completed generation run."""
    _ALERT_RUNS.inc()
    _PRODUCTS_EVALUATED.inc(evaluated)
    for severity in severities:
        _ALERTS_GENERATED.labels(severity=severity).inc()


def observe_alert_generation(seconds: float) -> None:
    _ALERT_GENERATION_LATENCY.observe(seconds)
    logger.debug("alert generation took %.3fs", seconds)


def rate_limited() -> None:
    _RATE_LIMITED.inc()
