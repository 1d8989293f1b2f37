"""Meal plan API routes."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional
from uuid import UUID

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from nourishplate.api.schemas.meal_plan import (
    ActivationResponse,
    GeneratePlanRequest,
    MealPlanDetailResponse,
    MealPlanListResponse,
    MealPlanResponse,
    MealPlanSummary,
    ReplaceMealRequest,
    ReplaceMealResponse,
)
from nourishplate.core.errors import InvalidDuration, PersistenceError, PlanNotFound
from nourishplate.db.deps import get_db
from nourishplate.db.models.meal_plan import MealPlanRecord
from nourishplate.observability.metrics import log_metric
from nourishplate.observability.tracing import trace
from nourishplate.services.meal_plan_generator import MealPlanGenerator
from nourishplate.services.meal_reminders import build_plan_reminders, dispatch_reminders
from nourishplate.services.nutrition import average_daily_calories
from nourishplate.services.plan_lifecycle import PlanLifecycleManager, record_to_plan

router = APIRouter()
logger = logging.getLogger(__name__)


def get_generator() -> MealPlanGenerator:
    return MealPlanGenerator()


@router.post(
    "/meal-plans/generate",
    response_model=MealPlanResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["meal-plans"],
)
def generate_meal_plan(
    payload: GeneratePlanRequest,
    http_request: Request,
    db: Session = Depends(get_db),
    generator: MealPlanGenerator = Depends(get_generator),
) -> MealPlanResponse:
    """Generate a plan (AI or fallback) and optionally save it as the active plan."""
    request_id = getattr(http_request.state, "request_id", None)
    metadata: Dict[str, Any] = {
        "route": "/meal-plans/generate",
        "subject_id": str(payload.subject_id),
        "duration": payload.duration,
        "save": payload.save,
        "request_id": request_id,
    }

    with trace("meal_plan.generate.request", metadata=metadata, user_id=str(payload.subject_id), request_id=request_id):
        try:
            result = generator.generate(
                payload.preferences,
                payload.subject_name,
                payload.duration,
                subject_id=payload.subject_id,
                subject_type=payload.subject_type,
                request_id=request_id,
            )
        except InvalidDuration as exc:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

        is_active = False
        if payload.save:
            record = _lifecycle_call(
                lambda manager: manager.create(result.plan, created_by=payload.created_by, request_id=request_id),
                db,
            )
            is_active = bool(record.is_active)

    log_metric(
        "meal_plan.generate.success",
        1,
        metadata={"subject_id": str(payload.subject_id), "source": result.source, "saved": payload.save},
    )
    return MealPlanResponse(plan=result.plan, saved=payload.save, is_active=is_active, request_id=request_id or "")


@router.get("/meal-plans", response_model=MealPlanListResponse, tags=["meal-plans"])
def list_meal_plans(
    http_request: Request,
    subject_id: UUID = Query(..., description="Subject the plans belong to"),
    db: Session = Depends(get_db),
) -> MealPlanListResponse:
    request_id = getattr(http_request.state, "request_id", None)
    with trace("meal_plan.list", metadata={"subject_id": str(subject_id)}, request_id=request_id):
        records = _lifecycle_call(lambda manager: manager.list_for_subject(subject_id), db)

    log_metric("meal_plan.list.count", len(records), metadata={"subject_id": str(subject_id)})
    return MealPlanListResponse(
        subject_id=subject_id,
        items=[_summary(record) for record in records],
        request_id=request_id or "",
    )


@router.get("/meal-plans/active", response_model=MealPlanDetailResponse, tags=["meal-plans"])
def get_active_meal_plan(
    http_request: Request,
    subject_id: UUID = Query(..., description="Subject whose active plan to load"),
    db: Session = Depends(get_db),
) -> MealPlanDetailResponse:
    request_id = getattr(http_request.state, "request_id", None)
    record = _lifecycle_call(lambda manager: manager.get_active(subject_id), db)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active meal plan")
    return _detail(record, request_id)


@router.get("/meal-plans/{plan_id}", response_model=MealPlanDetailResponse, tags=["meal-plans"])
def get_meal_plan(plan_id: UUID, http_request: Request, db: Session = Depends(get_db)) -> MealPlanDetailResponse:
    request_id = getattr(http_request.state, "request_id", None)
    record = _lifecycle_call(lambda manager: manager.get(plan_id), db)
    return _detail(record, request_id)


@router.post("/meal-plans/{plan_id}/activate", response_model=ActivationResponse, tags=["meal-plans"])
def activate_meal_plan(plan_id: UUID, http_request: Request, db: Session = Depends(get_db)) -> ActivationResponse:
    """Make this the subject's only active plan and queue today's reminders."""
    request_id = getattr(http_request.state, "request_id", None)
    with trace("meal_plan.activate", metadata={"plan_id": str(plan_id)}, request_id=request_id):
        record = _lifecycle_call(lambda manager: manager.activate(plan_id, request_id=request_id), db)

    _send_today_reminders(record)
    log_metric("meal_plan.activate.success", 1, metadata={"subject_id": str(record.subject_id)})
    return ActivationResponse(
        id=record.id,
        subject_id=record.subject_id,
        is_active=bool(record.is_active),
        request_id=request_id or "",
    )


@router.post("/meal-plans/{plan_id}/deactivate", response_model=ActivationResponse, tags=["meal-plans"])
def deactivate_meal_plan(plan_id: UUID, http_request: Request, db: Session = Depends(get_db)) -> ActivationResponse:
    request_id = getattr(http_request.state, "request_id", None)
    with trace("meal_plan.deactivate", metadata={"plan_id": str(plan_id)}, request_id=request_id):
        record = _lifecycle_call(lambda manager: manager.deactivate(plan_id, request_id=request_id), db)
    return ActivationResponse(
        id=record.id,
        subject_id=record.subject_id,
        is_active=bool(record.is_active),
        request_id=request_id or "",
    )


@router.delete("/meal-plans/{plan_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["meal-plans"])
def delete_meal_plan(plan_id: UUID, http_request: Request, db: Session = Depends(get_db)) -> Response:
    request_id = getattr(http_request.state, "request_id", None)
    with trace("meal_plan.delete", metadata={"plan_id": str(plan_id)}, request_id=request_id):
        was_active = _lifecycle_call(lambda manager: manager.delete(plan_id, request_id=request_id), db)
    log_metric("meal_plan.delete.success", 1, metadata={"was_active": was_active})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/meal-plans/{plan_id}/replace-meal", response_model=ReplaceMealResponse, tags=["meal-plans"])
def replace_meal(
    plan_id: UUID,
    payload: ReplaceMealRequest,
    http_request: Request,
    db: Session = Depends(get_db),
    generator: MealPlanGenerator = Depends(get_generator),
) -> ReplaceMealResponse:
    """Regenerate one slot using the plan's stored preferences and persist the new day."""
    request_id = getattr(http_request.state, "request_id", None)
    record = _lifecycle_call(lambda manager: manager.get(plan_id), db)
    plan = record_to_plan(record)

    with trace(
        "meal_plan.replace_meal",
        metadata={"plan_id": str(plan_id), "day": payload.day, "slot": payload.slot},
        user_id=str(record.subject_id),
        request_id=request_id,
    ):
        try:
            meal = generator.regenerate_meal(
                plan,
                payload.day,
                payload.slot,
                plan.preferences,
                payload.subject_name,
                request_id=request_id,
            )
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        day = _lifecycle_call(
            lambda manager: manager.replace_meal(plan_id, payload.day, payload.slot, meal, request_id=request_id),
            db,
        )

    log_metric("meal_plan.replace_meal.success", 1, metadata={"slot": payload.slot})
    return ReplaceMealResponse(plan_id=plan_id, day=day, replaced_meal=meal.name, request_id=request_id or "")


def _lifecycle_call(operation, db: Session):
    manager = PlanLifecycleManager(db)
    try:
        return operation(manager)
    except PlanNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found") from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def _send_today_reminders(record: MealPlanRecord) -> None:
    payloads = build_plan_reminders(record_to_plan(record), date.today())
    try:
        dispatch_reminders(payloads)
    except (httpx.HTTPError, RuntimeError, ValueError) as exc:
        # Activation is already committed; reminders are retried on the next activation.
        logger.warning("Meal reminders not sent for plan %s: %s", record.id, exc)
        log_metric("meal_reminders.failed", 1, metadata={"plan_id": str(record.id)})


def _summary(record: MealPlanRecord) -> MealPlanSummary:
    return MealPlanSummary(
        id=record.id,
        subject_id=record.subject_id,
        title=record.title,
        duration=record.duration,
        is_active=bool(record.is_active),
        source=record.source,
        average_daily_calories=average_daily_calories(record_to_plan(record)),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _detail(record: MealPlanRecord, request_id: Optional[str]) -> MealPlanDetailResponse:
    return MealPlanDetailResponse(
        id=record.id,
        subject_id=record.subject_id,
        is_active=bool(record.is_active),
        source=record.source,
        created_at=record.created_at,
        updated_at=record.updated_at,
        plan=record_to_plan(record),
        request_id=request_id or "",
    )
