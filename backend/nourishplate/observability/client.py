"""Opik client bootstrap."""
from __future__ import annotations

import logging

import opik

from nourishplate.core.config import settings

logger = logging.getLogger(__name__)

_client: opik.Opik | None = None


def init_opik() -> opik.Opik | None:
    """Create the shared Opik client when tracing is enabled; otherwise return None."""
    global _client
    if not settings.opik_enabled:
        return None
    if _client is None:
        _client = opik.Opik(project_name=settings.opik_project, api_key=settings.opik_api_key)
        logger.info("Opik tracing enabled (project=%s)", settings.opik_project)
    return _client


def get_opik_client() -> opik.Opik | None:
    return _client if settings.opik_enabled else None


def shutdown_opik() -> None:
    global _client
    if _client is not None:
        _client.flush()
        _client = None
