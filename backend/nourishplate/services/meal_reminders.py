"""Meal reminder payloads for the active plan."""
from __future__ import annotations

import logging
from datetime import date, datetime, time as dt_time
from typing import Dict, List

import httpx
from zoneinfo import ZoneInfo

from nourishplate.api.schemas.meal_plan import MealPlan
from nourishplate.core.config import settings
from nourishplate.observability.metrics import log_metric
from nourishplate.observability.tracing import trace

logger = logging.getLogger(__name__)

REMINDER_TIMES: Dict[str, dt_time] = {
    "breakfast": dt_time(7, 30),
    "lunch": dt_time(12, 0),
    "snack": dt_time(15, 30),
    "dinner": dt_time(18, 30),
}


def build_plan_reminders(plan: MealPlan, on_date: date) -> List[dict]:
    """Return one reminder per slot of the plan day falling on ``on_date``."""
    day = next((entry for entry in plan.daily_plans if entry.date == on_date), None)
    if day is None:
        return []

    tz = ZoneInfo(settings.reminder_timezone)
    payloads: List[dict] = []
    for slot in plan.slots:
        meal = day.meals.get(slot)
        if meal is None:
            continue
        send_at = datetime.combine(on_date, REMINDER_TIMES[slot], tzinfo=tz)
        payloads.append(
            {
                "plan_id": str(plan.id),
                "subject_id": str(plan.subject_id) if plan.subject_id else None,
                "slot": slot,
                "send_at": send_at.isoformat(),
                "title": f"{slot.capitalize()} time {meal.emoji}".strip(),
                "body": f"Today's {slot}: {meal.name} ({meal.prep_time or 'quick prep'})",
            }
        )
    return payloads


def dispatch_reminders(payloads: List[dict]) -> int:
    """Send reminder payloads to the configured webhook. Returns how many were sent."""
    if not payloads:
        return 0
    if not settings.notifications_enabled or settings.notifications_provider != "webhook":
        logger.debug("Meal reminders disabled; skipping %s payloads", len(payloads))
        return 0
    if not settings.notifications_webhook_url:
        raise ValueError("NOTIFICATIONS_WEBHOOK_URL is required for the webhook provider")

    headers = {"accept": "application/json", "content-type": "application/json"}
    with trace("notifications.meal_reminders", metadata={"count": len(payloads)}):
        with httpx.Client(timeout=5) as client:
            response = client.post(settings.notifications_webhook_url, json=payloads, headers=headers)
            if response.status_code >= 400:
                raise RuntimeError(f"Failed to send meal reminders: {response.text}")
    log_metric("meal_reminders.sent", len(payloads))
    logger.info("Meal reminders sent count=%s", len(payloads))
    return len(payloads)
