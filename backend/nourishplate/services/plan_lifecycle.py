"""Persistence and activation state for meal plans.

A subject has at most one active plan. Activation is a bulk deactivate of the
subject's other plans followed by a single update of the target, committed in
one transaction; the partial unique index ``uq_meal_plans_active_subject``
rejects a racing activation, which is then retried.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from nourishplate.api.schemas.meal_plan import DailyPlan, Meal, MealPlan
from nourishplate.core.config import settings
from nourishplate.core.errors import PersistenceError, PlanNotFound
from nourishplate.db.models.meal_plan import MealPlanRecord
from nourishplate.db.models.plan_action_log import PlanActionLog
from nourishplate.services.nutrition import replace_meal as replace_day_meal

logger = logging.getLogger(__name__)

T = TypeVar("T")


def record_to_plan(record: MealPlanRecord) -> MealPlan:
    """Rebuild the typed plan stored in ``record.plan_data``."""
    payload = dict(record.plan_data or {})
    payload["id"] = record.id
    payload["subject_id"] = record.subject_id
    payload.setdefault("preferences", record.preferences or {})
    return MealPlan.model_validate(payload)


class PlanLifecycleManager:
    def __init__(self, db: Session, *, max_attempts: int | None = None) -> None:
        self.db = db
        self.max_attempts = max(1, max_attempts or settings.activation_max_attempts)

    # Reads

    def get(self, plan_id: UUID) -> MealPlanRecord:
        try:
            record = self.db.get(MealPlanRecord, plan_id)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to load meal plan {plan_id}") from exc
        if record is None:
            raise PlanNotFound(plan_id)
        return record

    def list_for_subject(self, subject_id: UUID) -> List[MealPlanRecord]:
        try:
            return (
                self.db.query(MealPlanRecord)
                .filter(MealPlanRecord.subject_id == subject_id)
                .order_by(MealPlanRecord.created_at.desc(), MealPlanRecord.id)
                .all()
            )
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to list meal plans for {subject_id}") from exc

    def get_active(self, subject_id: UUID) -> Optional[MealPlanRecord]:
        try:
            return (
                self.db.query(MealPlanRecord)
                .filter(MealPlanRecord.subject_id == subject_id, MealPlanRecord.is_active.is_(True))
                .first()
            )
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to load active meal plan for {subject_id}") from exc

    # Mutations

    def create(
        self,
        plan: MealPlan,
        *,
        created_by: UUID | None = None,
        activate: bool | None = None,
        request_id: str | None = None,
    ) -> MealPlanRecord:
        """Persist a generated plan, optionally as the subject's active plan."""
        if plan.subject_id is None:
            raise ValueError("Meal plan must have a subject_id before it can be saved")
        make_active = settings.auto_activate_new_plans if activate is None else activate

        def apply() -> MealPlanRecord:
            if make_active:
                self._deactivate_others(plan.subject_id, plan.id)
            record = MealPlanRecord(
                id=plan.id,
                subject_id=plan.subject_id,
                subject_type=plan.subject_type,
                created_by=created_by,
                title=plan.title,
                description=plan.description,
                duration=plan.duration,
                plan_data=plan.model_dump(mode="json"),
                preferences=plan.preferences.model_dump(mode="json"),
                source=plan.source,
                is_active=make_active,
            )
            self.db.add(record)
            self.db.flush()
            self._log(
                plan.subject_id,
                plan.id,
                "meal_plan_created",
                {"duration": plan.duration, "source": plan.source, "active": make_active},
                "Generated meal plan saved",
                request_id,
            )
            return record

        record = self._commit_with_retry(apply, action="create")
        self.db.refresh(record)
        logger.info("Saved meal plan %s for subject %s (active=%s)", record.id, record.subject_id, record.is_active)
        return record

    def activate(self, plan_id: UUID, *, request_id: str | None = None) -> MealPlanRecord:
        record = self.get(plan_id)
        subject_id = record.subject_id

        def apply() -> int:
            deactivated = self._deactivate_others(subject_id, plan_id)
            self.db.query(MealPlanRecord).filter(MealPlanRecord.id == plan_id).update(
                {MealPlanRecord.is_active: True}, synchronize_session=False
            )
            self._log(
                subject_id,
                plan_id,
                "meal_plan_activated",
                {"deactivated": deactivated},
                "Meal plan set as active",
                request_id,
            )
            return deactivated

        self._commit_with_retry(apply, action="activate")
        self.db.refresh(record)
        return record

    def deactivate(self, plan_id: UUID, *, request_id: str | None = None) -> MealPlanRecord:
        record = self.get(plan_id)

        def apply() -> None:
            self.db.query(MealPlanRecord).filter(MealPlanRecord.id == plan_id).update(
                {MealPlanRecord.is_active: False}, synchronize_session=False
            )
            self._log(record.subject_id, plan_id, "meal_plan_deactivated", {}, "Meal plan deactivated", request_id)

        self._commit_with_retry(apply, action="deactivate")
        self.db.refresh(record)
        return record

    def delete(self, plan_id: UUID, *, request_id: str | None = None) -> bool:
        """Remove a plan. Returns whether it was the active one; no other plan is promoted."""
        record = self.get(plan_id)
        subject_id, was_active = record.subject_id, bool(record.is_active)

        def apply() -> None:
            self.db.delete(record)
            self._log(
                subject_id,
                plan_id,
                "meal_plan_deleted",
                {"was_active": was_active},
                "Meal plan deleted",
                request_id,
            )

        self._commit(apply, action="delete")
        if was_active:
            logger.info("Deleted active meal plan %s; subject %s has no active plan", plan_id, subject_id)
        return was_active

    def replace_meal(
        self,
        plan_id: UUID,
        day_index: int,
        slot: str,
        meal: Meal,
        *,
        request_id: str | None = None,
    ) -> DailyPlan:
        """Store ``meal`` in one slot and return the day with recomputed totals."""
        record = self.get(plan_id)
        plan = record_to_plan(record)
        position = next((i for i, day in enumerate(plan.daily_plans) if day.day == day_index), None)
        if position is None:
            raise ValueError(f"Plan has no day {day_index}")
        previous = plan.daily_plans[position].meals.get(slot)
        updated_day = replace_day_meal(plan.daily_plans[position], slot, meal)
        days = list(plan.daily_plans)
        days[position] = updated_day
        updated_plan = plan.model_copy(update={"daily_plans": days})

        def apply() -> None:
            record.plan_data = updated_plan.model_dump(mode="json")
            self._log(
                record.subject_id,
                plan_id,
                "meal_replaced",
                {
                    "day": day_index,
                    "slot": slot,
                    "previous": previous.name if previous else None,
                    "replacement": meal.name,
                },
                "Meal swapped by user",
                request_id,
            )

        self._commit(apply, action="replace_meal")
        return updated_day

    # Internals

    def _deactivate_others(self, subject_id: UUID, keep_id: UUID) -> int:
        return (
            self.db.query(MealPlanRecord)
            .filter(
                MealPlanRecord.subject_id == subject_id,
                MealPlanRecord.id != keep_id,
                MealPlanRecord.is_active.is_(True),
            )
            .update({MealPlanRecord.is_active: False}, synchronize_session=False)
        )

    def _log(
        self,
        subject_id: UUID,
        plan_id: UUID,
        action_type: str,
        payload: Dict[str, Any],
        reason: str,
        request_id: str | None,
    ) -> None:
        self.db.add(
            PlanActionLog(
                subject_id=subject_id,
                plan_id=plan_id,
                action_type=action_type,
                action_payload={**payload, "request_id": request_id or ""},
                reason=reason,
            )
        )

    def _commit(self, apply: Callable[[], T], *, action: str) -> T:
        try:
            result = apply()
            self.db.commit()
            return result
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Meal plan %s failed: %s", action, exc)
            raise PersistenceError(f"Failed to {action} meal plan") from exc

    def _commit_with_retry(self, apply: Callable[[], T], *, action: str) -> T:
        for attempt in range(1, self.max_attempts + 1):
            try:
                result = apply()
                self.db.commit()
                return result
            except IntegrityError as exc:
                self.db.rollback()
                if attempt >= self.max_attempts:
                    logger.error("Meal plan %s still conflicting after %s attempts", action, attempt)
                    raise PersistenceError(f"Failed to {action} meal plan: concurrent activation") from exc
                logger.warning("Meal plan %s hit the active-plan constraint (attempt %s); retrying", action, attempt)
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.error("Meal plan %s failed: %s", action, exc)
                raise PersistenceError(f"Failed to {action} meal plan") from exc
        raise PersistenceError(f"Failed to {action} meal plan")
