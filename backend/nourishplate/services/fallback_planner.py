"""Deterministic meal plan synthesis from the canned catalog."""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import UUID, uuid4

from nourishplate.api.schemas.meal_plan import DailyPlan, Meal, MealPlan, PlanPreferences
from nourishplate.services.fallback_catalog import DEFAULT_ALTERNATIVES, FALLBACK_MEALS
from nourishplate.services.nutrition import recompute_day

logger = logging.getLogger(__name__)

VARIATION_CYCLE = 3


def synthesize_fallback_plan(
    preferences: PlanPreferences,
    subject_name: str,
    duration: int,
    *,
    subject_id: UUID | None = None,
    subject_type: str = "kid",
    start_date: date | None = None,
    catalog: Mapping[str, Sequence[Dict[str, Any]]] | None = None,
) -> MealPlan:
    """Build a full plan without calling the model.

    Day ``d`` takes the catalog entry at ``(d - 1) % size`` for every slot.
    Once the catalog wraps, the repeat is labelled "(Variation N)" with
    ``N = ((d - 1) // size) % 3 + 1``, so a repeated meal is never disguised.
    Identical inputs always give identical meal selections.
    """
    source_catalog = catalog if catalog is not None else FALLBACK_MEALS
    slots = list(preferences.meal_slots)
    for slot in slots:
        if not source_catalog.get(slot):
            raise RuntimeError(f"Fallback catalog has no meals for slot '{slot}'")

    first_day = start_date or date.today()
    daily_plans: List[DailyPlan] = []
    for day in range(1, duration + 1):
        meals = {slot: _pick_meal(source_catalog[slot], slot, day) for slot in slots}
        plan_day = DailyPlan(day=day, date=first_day + timedelta(days=day - 1), meals=meals)
        daily_plans.append(recompute_day(plan_day))

    logger.info("Synthesized fallback plan for %s (%s days, slots=%s)", subject_name, duration, ",".join(slots))
    return MealPlan(
        subject_id=subject_id,
        subject_type=subject_type,
        title=_fallback_title(subject_name, subject_type),
        description=_fallback_description(subject_name, subject_type, duration),
        duration=duration,
        preferences=preferences,
        daily_plans=daily_plans,
        source="fallback",
    )


def default_alternative_meal(original: Meal, slot: Optional[str] = None) -> Meal:
    """Small built-in replacement that keeps the original meal's calories and nutrition."""
    meal_slot = slot or original.type
    alternative = DEFAULT_ALTERNATIVES[meal_slot]
    return Meal(
        id=f"alt-{meal_slot}-{uuid4().hex[:8]}",
        name=alternative["name"],
        description=alternative["description"],
        type=meal_slot,
        calories=original.calories,
        prep_time="10 min",
        difficulty="easy",
        ingredients=["Ingredient 1", "Ingredient 2"],
        instructions=["Step 1", "Step 2"],
        nutrition=original.nutrition.model_copy(),
        allergens=[],
        kid_friendly_score=8,
        portability_score=8,
        prep_tips=["Easy to prepare"],
        storage_tips=["Store properly"],
        emoji=alternative["emoji"],
        category=meal_slot,
    )


def variation_offset(day: int, catalog_size: int) -> int:
    return ((day - 1) // catalog_size) % VARIATION_CYCLE


def _pick_meal(entries: Sequence[Dict[str, Any]], slot: str, day: int) -> Meal:
    size = len(entries)
    base = entries[(day - 1) % size]
    offset = variation_offset(day, size)
    name = base["name"]
    if offset > 0:
        name = f"{name} (Variation {offset + 1})"
    return Meal.model_validate(
        {
            **base,
            "id": f"fallback-{slot}-{day}",
            "name": name,
            "type": slot,
            "category": slot,
        }
    )


def _fallback_title(subject_name: str, subject_type: str) -> str:
    if subject_type == "kid":
        return f"School Meal Plan for {subject_name}"
    return f"Meal Plan for {subject_name}"


def _fallback_description(subject_name: str, subject_type: str, duration: int) -> str:
    kind = "school meal plan" if subject_type == "kid" else "meal plan"
    return f"A {duration}-day {kind} designed specifically for {subject_name}"
