"""Tracing helpers wrapping Opik traces."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, Optional

from nourishplate.observability.client import get_opik_client

logger = logging.getLogger(__name__)


@contextmanager
def trace(
    name: str,
    *,
    metadata: Optional[Dict[str, Any]] = None,
    user_id: str | None = None,
    request_id: str | None = None,
) -> Iterator[Dict[str, Any]]:
    """Time a block and forward it to Opik when tracing is enabled.

    The yielded dict can be filled with output fields by the caller.
    """
    span: Dict[str, Any] = {}
    trace_metadata = dict(metadata or {})
    if user_id:
        trace_metadata.setdefault("user_id", user_id)
    if request_id:
        trace_metadata.setdefault("request_id", request_id)

    client = get_opik_client()
    opik_trace = client.trace(name=name, metadata=trace_metadata) if client else None
    start = perf_counter()
    error: BaseException | None = None
    try:
        yield span
    except BaseException as exc:
        error = exc
        raise
    finally:
        duration_ms = (perf_counter() - start) * 1000
        logger.debug("trace %s finished in %.2fms (error=%s)", name, duration_ms, type(error).__name__ if error else None)
        if opik_trace is not None:
            output = dict(span)
            output["duration_ms"] = duration_ms
            if error is not None:
                output["error"] = repr(error)
            opik_trace.end(output=output)
