"""Lightweight metric emission."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("nourishplate.metrics")


def log_metric(name: str, value: float | int, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Record a numeric metric as a structured log line."""
    logger.info("metric %s=%s %s", name, value, metadata or {})
