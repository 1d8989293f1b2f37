"""FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request

from nourishplate.api.routes import meal_plans
from nourishplate.core.config import settings
from nourishplate.core.logging import configure_logging
from nourishplate.observability.client import init_opik, shutdown_opik

REQUEST_ID_HEADER = "X-Request-ID"

configure_logging(log_level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_opik()
    logger.info("%s started", settings.app_name)
    yield
    shutdown_opik()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)


@app.middleware("http")
async def assign_request_id(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


app.include_router(meal_plans.router)
