"""Audit logging utilities.

Emits one JSON line per security-relevant action on the ``audit`` logger and,
when ``AUDIT_LOG_FILE`` is configured, appends the same line to that file.
"""
from __future__ import annotations

import json
import logging
import os
import time
from typing import Any

from inventory_api.core.config import settings

_logger = logging.getLogger("audit")


def log_audit_event(action: str, user_id: int | None = None, status: str = "success", **metadata: Any) -> None:
    """Record an audit event.

    Parameters:
        action: A machine-readable action key (e.g. 'auth.login', 'product.delete').
        user_id: The acting user's ID (if available).
        status: 'success' | 'failure'.
        **metadata: Additional context fields (ids, counts, etc.).
    """
    event = {
        "ts": int(time.time()),
        "action": action,
        "user_id": user_id,
        "status": status,
        **metadata,
    }
    line = json.dumps(event, separators=(",", ":"), default=str)
    path = settings.AUDIT_LOG_FILE
    if path:
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            _logger.warning("Failed to write audit event to %s", path)
    _logger.info(line)


def log_failure(action: str, user_id: int | None = None, error: str | None = None, **extra: Any) -> None:
    log_audit_event(action, user_id=user_id, status="failure", error=error, **extra)
