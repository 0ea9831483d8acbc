"""
Concurrent low-stock alert generation.

One run takes a snapshot of the product table, submits one evaluation unit
per product to a thread pool and gathers the alerts the units publish:

    store.fetch_all() ──► unit(p1) ─┐
                          unit(p2) ─┼─► collection queue ──► drain ──► report
                          unit(pN) ─┘          ▲
                   supervisor: wait(all units) ┘ then enqueue CLOSED

Completion is derived from joining every dispatched unit, never from the
number of alerts received, so products that yield no alert cannot end the
drain early. Units share no mutable state apart from the queue.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Iterable, Sequence

from inventory_api import metrics
from inventory_api.core.exceptions import AlertGenerationTimeoutError
from inventory_api.models.inventory_schemas import ProductAlert

from .alert_rules import StockedItem, evaluate
from .store import ProductStore

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 5
DEFAULT_MAX_WORKERS = 32
DEFAULT_PROCESSING_DELAY = 0.01  # seconds of simulated work per unit

_CLOSED = object()


@dataclass(frozen=True)
class _TimedOut:
    pending: int


@dataclass
class AlertReport:
    """Outcome of one generation run."""
    alerts: list[ProductAlert]
    threshold: int
    evaluated: int
    duration_seconds: float = 0.0

    @property
    def total(self) -> int:
        return len(self.alerts)


class AlertGenerator:
    """
    Evaluates a whole product snapshot in parallel.

    Args:
        store: Source of the product snapshot (read once per ``generate`` call)
        default_threshold: Used whenever the caller's threshold is missing or <= 0
        max_workers: Upper bound on concurrently running units
        processing_delay: Simulated per-product work in seconds
        timeout: Seconds to wait for all units; None waits indefinitely
    """

    def __init__(
        self,
        store: ProductStore,
        *,
        default_threshold: int = DEFAULT_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
        processing_delay: float = DEFAULT_PROCESSING_DELAY,
        timeout: float | None = None,
    ):
        if default_threshold <= 0:
            raise ValueError("default_threshold must be positive")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._store = store
        self._default_threshold = default_threshold
        self._max_workers = max_workers
        self._processing_delay = max(processing_delay, 0.0)
        self._timeout = timeout

    @property
    def default_threshold(self) -> int:
        return self._default_threshold

    def normalize_threshold(self, threshold: int | None) -> int:
        if threshold is None or threshold <= 0:
            return self._default_threshold
        return threshold

    def generate(self, threshold: int | None = None) -> AlertReport:
        """Snapshot the store and evaluate every product in it.

        A failing snapshot read propagates as ``StoreError`` before any unit
        is dispatched.
        """
        threshold = self.normalize_threshold(threshold)
        products = self._store.fetch_all()
        started = time.perf_counter()
        alerts = self.evaluate_all(products, threshold)
        duration = time.perf_counter() - started

        metrics.alerts_generated((a.severity.value for a in alerts), evaluated=len(products))
        metrics.observe_alert_generation(duration)
        logger.info(
            "Generated %d alerts from %d products (threshold=%d, %.1fms)",
            len(alerts),
            len(products),
            threshold,
            duration * 1000,
        )
        return AlertReport(
            alerts=alerts,
            threshold=threshold,
            evaluated=len(products),
            duration_seconds=duration,
        )

    def evaluate_all(self, products: Iterable[StockedItem], threshold: int | None = None) -> list[ProductAlert]:
        """Fan out one unit per product and return the collected alerts.

        Returns only after every unit has finished. The order of the result
        is unspecified; it holds at most one alert per product id.
        """
        threshold = self.normalize_threshold(threshold)
        snapshot = list(products)
        if not snapshot:
            return []

        # Room for one alert per product plus the close marker; producers never block
        collected: queue.Queue = queue.Queue(maxsize=len(snapshot) + 1)
        pool = ThreadPoolExecutor(
            max_workers=min(len(snapshot), self._max_workers),
            thread_name_prefix="alert-unit",
        )
        timed_out = False
        try:
            units = [pool.submit(self._run_unit, product, threshold, collected) for product in snapshot]
            supervisor = threading.Thread(
                target=self._close_when_done,
                args=(units, collected),
                name="alert-supervisor",
                daemon=True,
            )
            supervisor.start()
            try:
                alerts = self._drain(collected)
            except AlertGenerationTimeoutError:
                timed_out = True
                raise
            supervisor.join()
        finally:
            pool.shutdown(wait=not timed_out, cancel_futures=timed_out)

        # Surface a unit that crashed instead of silently dropping its product
        for unit in units:
            unit.result()
        return alerts

    def _run_unit(self, product: StockedItem, threshold: int, collected: queue.Queue) -> None:
        if self._processing_delay:
            time.sleep(self._processing_delay)
        alert = evaluate(product, threshold)
        if alert is not None:
            collected.put_nowait(alert)

    def _close_when_done(self, units: Sequence[Future], collected: queue.Queue) -> None:
        _, not_done = wait(units, timeout=self._timeout)
        if not_done:
            for unit in not_done:
                unit.cancel()
            collected.put(_TimedOut(pending=len(not_done)))
        else:
            collected.put(_CLOSED)

    def _drain(self, collected: queue.Queue) -> list[ProductAlert]:
        by_product: dict[int, ProductAlert] = {}
        while True:
            item = collected.get()
            if item is _CLOSED:
                break
            if isinstance(item, _TimedOut):
                logger.warning("Alert generation timed out with %d units pending", item.pending)
                raise AlertGenerationTimeoutError(self._timeout or 0.0, item.pending)
            by_product[item.product_id] = item
        return list(by_product.values())
