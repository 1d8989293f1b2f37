"""Meal plan generation: prompt -> oracle -> sanitize -> validate, with catalog fallback."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional
from uuid import UUID, uuid4

from pydantic import ValidationError

from nourishplate.api.schemas.meal_plan import DailyPlan, Meal, MealPlan, PlanPreferences
from nourishplate.core.errors import OracleFailure, SanitizeFailure, ValidationFailure
from nourishplate.observability.metrics import log_metric
from nourishplate.observability.tracing import trace
from nourishplate.services.fallback_planner import default_alternative_meal, synthesize_fallback_plan
from nourishplate.services.meal_prompt_builder import build_meal_prompt, build_plan_prompt, validate_duration
from nourishplate.services.model_oracle import (
    MEAL_GENERATION_CONFIG,
    PLAN_GENERATION_CONFIG,
    ModelOracle,
    build_default_oracle,
)
from nourishplate.services.nutrition import recompute_day
from nourishplate.services.plan_validator import PlanCandidate, validate_meal_candidate, validate_plan_candidate
from nourishplate.services.response_sanitizer import parse_model_json

logger = logging.getLogger(__name__)

RECOVERABLE_ERRORS = (OracleFailure, SanitizeFailure, ValidationFailure)


@dataclass
class GenerationResult:
    plan: MealPlan
    source: str
    failure_reason: Optional[str] = None

    @property
    def fallback_used(self) -> bool:
        return self.source == "fallback"


class MealPlanGenerator:
    """Produces meal plans and replacement meals.

    ``generate`` only raises ``InvalidDuration``; every model-side failure turns
    into the deterministic fallback plan. Nothing here touches the database.
    """

    def __init__(self, oracle: Optional[ModelOracle] = None, *, use_default_oracle: bool = True) -> None:
        if oracle is None and use_default_oracle:
            oracle = build_default_oracle()
        self.oracle = oracle

    def generate(
        self,
        preferences: PlanPreferences,
        subject_name: str,
        duration: int,
        *,
        subject_id: UUID | None = None,
        subject_type: str = "kid",
        start_date: date | None = None,
        request_id: str | None = None,
    ) -> GenerationResult:
        duration = validate_duration(duration)
        first_day = start_date or date.today()
        metadata = {
            "subject_id": str(subject_id) if subject_id else None,
            "subject_type": subject_type,
            "duration": duration,
            "slots": list(preferences.meal_slots),
        }

        with trace("meal_plan.generate", metadata=metadata, request_id=request_id) as span:
            failure_reason: Optional[str] = None
            plan: Optional[MealPlan] = None
            if self.oracle is None:
                failure_reason = "no model oracle configured"
            else:
                try:
                    plan = self._generate_with_model(
                        preferences, subject_name, duration, subject_id, subject_type, first_day
                    )
                except RECOVERABLE_ERRORS as exc:
                    failure_reason = f"{type(exc).__name__}: {exc}"
                except Exception as exc:  # noqa: BLE001
                    logger.exception("Unexpected error during model generation")
                    failure_reason = f"{type(exc).__name__}: {exc}"

            if plan is None:
                logger.warning(
                    "Falling back to catalog plan for subject=%s duration=%s: %s",
                    subject_id,
                    duration,
                    failure_reason,
                )
                plan = synthesize_fallback_plan(
                    preferences,
                    subject_name,
                    duration,
                    subject_id=subject_id,
                    subject_type=subject_type,
                    start_date=first_day,
                )
            span["source"] = plan.source
            span["failure_reason"] = failure_reason

        log_metric(
            "meal_plan.generate.fallback_used",
            1 if plan.source == "fallback" else 0,
            metadata={"duration": duration, "subject_type": subject_type},
        )
        return GenerationResult(plan=plan, source=plan.source, failure_reason=failure_reason)

    def regenerate_meal(
        self,
        plan: MealPlan,
        day_index: int,
        slot: str,
        preferences: PlanPreferences,
        subject_name: str,
        *,
        request_id: str | None = None,
    ) -> Meal:
        """Return a new meal for ``slot`` on ``day_index``; the caller recomputes and persists."""
        day = next((entry for entry in plan.daily_plans if entry.day == day_index), None)
        if day is None:
            raise ValueError(f"Plan has no day {day_index}")
        if slot not in day.meals:
            raise ValueError(f"Plan has no {slot} slot")
        original = day.meals[slot]

        with trace(
            "meal_plan.regenerate_meal",
            metadata={"plan_id": str(plan.id), "day": day_index, "slot": slot},
            request_id=request_id,
        ) as span:
            meal: Optional[Meal] = None
            if self.oracle is not None:
                try:
                    prompt = build_meal_prompt(original, slot, preferences, subject_name)
                    raw = self.oracle.complete(prompt, MEAL_GENERATION_CONFIG)
                    meal = validate_meal_candidate(parse_model_json(raw), slot)
                except RECOVERABLE_ERRORS as exc:
                    logger.warning("Meal regeneration failed for %s day %s: %s", slot, day_index, exc)
                except Exception:  # noqa: BLE001
                    logger.exception("Unexpected error during meal regeneration")

            if meal is None:
                meal = default_alternative_meal(original, slot)
                span["source"] = "fallback"
            else:
                meal = meal.model_copy(update={"id": _meal_id(slot, day_index)})
                span["source"] = "ai"

        log_metric("meal_plan.regenerate_meal.fallback_used", 1 if span["source"] == "fallback" else 0)
        return meal

    def _generate_with_model(
        self,
        preferences: PlanPreferences,
        subject_name: str,
        duration: int,
        subject_id: UUID | None,
        subject_type: str,
        first_day: date,
    ) -> MealPlan:
        prompt = build_plan_prompt(preferences, subject_name, duration)
        raw = self.oracle.complete(prompt, PLAN_GENERATION_CONFIG)
        candidate = validate_plan_candidate(parse_model_json(raw), duration, preferences.meal_slots)
        if candidate.warnings:
            log_metric("meal_plan.generate.defaulted_fields", len(candidate.warnings))
        return _assemble_plan(candidate, preferences, duration, subject_id, subject_type, first_day)


def _assemble_plan(
    candidate: PlanCandidate,
    preferences: PlanPreferences,
    duration: int,
    subject_id: UUID | None,
    subject_type: str,
    first_day: date,
) -> MealPlan:
    daily_plans = []
    for day_number, meals in enumerate(candidate.days, start=1):
        with_ids = {
            slot: meal.model_copy(update={"id": _meal_id(slot, day_number)}) for slot, meal in meals.items()
        }
        plan_day = DailyPlan(day=day_number, date=first_day + timedelta(days=day_number - 1), meals=with_ids)
        daily_plans.append(recompute_day(plan_day))
    try:
        return MealPlan(
            subject_id=subject_id,
            subject_type=subject_type,
            title=candidate.title,
            description=candidate.description,
            duration=duration,
            preferences=preferences,
            daily_plans=daily_plans,
            source="ai",
        )
    except ValidationError as exc:
        raise ValidationFailure("plan.assemble", str(exc)) from exc


def _meal_id(slot: str, day: int) -> str:
    return f"{slot}-{day}-{uuid4().hex[:8]}"
