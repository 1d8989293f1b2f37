"""Structural validation of parsed model output.

Hard rules fail fast with ``ValidationFailure``; cosmetic gaps (missing or
malformed calories/nutrients, odd list fields) are defaulted and recorded as
warnings so a plan is not thrown away over a missing fiber count.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from nourishplate.api.schemas.meal_plan import NUTRIENT_FIELDS, Meal
from nourishplate.core.errors import ValidationFailure

logger = logging.getLogger(__name__)

PLAN_DAY_KEYS = ("daily_plans", "dailyMeals", "days")
MEAL_TYPE_KEYS = ("type", "mealType", "meal_type", "category")
DIFFICULTIES = {"easy", "medium", "hard"}
_LEADING_NUMBER_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


@dataclass
class PlanCandidate:
    title: str
    description: str
    days: List[Dict[str, Meal]]
    warnings: List[str] = field(default_factory=list)


def validate_plan_candidate(data: Any, duration: int, slots: Sequence[str]) -> PlanCandidate:
    """Check a parsed plan against the contract and return typed meals per day."""
    if not isinstance(data, dict):
        raise ValidationFailure("plan.shape", "top-level value must be a JSON object")
    title = _required_text(data.get("title"))
    if not title:
        raise ValidationFailure("plan.title", "missing or empty title")
    description = _required_text(data.get("description"))
    if not description:
        raise ValidationFailure("plan.description", "missing or empty description")

    raw_days = next((data[key] for key in PLAN_DAY_KEYS if isinstance(data.get(key), list)), None)
    if raw_days is None:
        raise ValidationFailure("plan.daily_plans", "missing per-day array")
    if len(raw_days) != duration:
        raise ValidationFailure("plan.duration", f"expected {duration} days, got {len(raw_days)}")

    warnings: List[str] = []
    days: List[Dict[str, Meal]] = []
    for position, raw_day in enumerate(raw_days, start=1):
        if not isinstance(raw_day, dict):
            raise ValidationFailure("day.shape", f"day {position} is not an object")
        slot_values = _day_meals(raw_day)
        meals: Dict[str, Meal] = {}
        for slot in slots:
            raw_meal = slot_values.get(slot)
            if not isinstance(raw_meal, dict):
                raise ValidationFailure("day.missing_meal", f"day {position} has no {slot}")
            meals[slot] = coerce_meal(raw_meal, slot, warnings, context=f"day {position} {slot}", require_name=False)
        days.append(meals)

    if warnings:
        logger.warning("Plan candidate accepted with %s defaulted fields (first: %s)", len(warnings), warnings[0])
    return PlanCandidate(title=title, description=description, days=days, warnings=warnings)


def validate_meal_candidate(data: Any, slot: str) -> Meal:
    """Validate a single replacement meal object."""
    if isinstance(data, dict) and isinstance(data.get("meal"), dict):
        data = data["meal"]
    if not isinstance(data, dict):
        raise ValidationFailure("meal.shape", "meal must be a JSON object")
    warnings: List[str] = []
    meal = coerce_meal(data, slot, warnings, context=slot, require_name=True)
    if warnings:
        logger.warning("Replacement %s accepted with defaulted fields: %s", slot, "; ".join(warnings))
    return meal


def coerce_meal(
    raw: Mapping[str, Any],
    slot: str,
    warnings: List[str],
    *,
    context: str,
    require_name: bool,
) -> Meal:
    name = _required_text(raw.get("name") or raw.get("meal"))
    if not name:
        if require_name:
            raise ValidationFailure("meal.name", f"{context} has no name")
        warnings.append(f"{context}: name defaulted")
        name = f"{slot.capitalize()} meal"

    raw_nutrition = raw.get("nutrition") if isinstance(raw.get("nutrition"), dict) else raw.get("macros")
    if not isinstance(raw_nutrition, dict):
        warnings.append(f"{context}: nutrition defaulted to 0")
        raw_nutrition = {}
    nutrition = {
        nutrient: _non_negative(raw_nutrition.get(nutrient), warnings, f"{context}.{nutrient}", quiet=not raw_nutrition)
        for nutrient in NUTRIENT_FIELDS
    }

    difficulty = str(raw.get("difficulty") or "easy").lower()
    payload = {
        "id": raw.get("id") if isinstance(raw.get("id"), str) else "",
        "name": name,
        "description": _text(raw.get("description")),
        "type": slot,
        "calories": int(round(_non_negative(raw.get("calories"), warnings, f"{context}.calories"))),
        "prep_time": _text(raw.get("prep_time") or raw.get("prepTime")),
        "difficulty": difficulty if difficulty in DIFFICULTIES else "easy",
        "ingredients": _string_list(raw.get("ingredients"), split_commas=True),
        "instructions": _string_list(raw.get("instructions"), split_commas=False),
        "nutrition": nutrition,
        "allergens": [item.lower() for item in _string_list(raw.get("allergens"), split_commas=True)],
        "kid_friendly_score": _score(raw.get("kid_friendly_score")),
        "portability_score": _score(raw.get("portability_score")),
        "prep_tips": _string_list(raw.get("prep_tips"), split_commas=False),
        "storage_tips": _string_list(raw.get("storage_tips"), split_commas=False),
        "emoji": _text(raw.get("emoji")),
        "category": _text(raw.get("category")) or slot,
    }
    return Meal.model_validate(payload)


def _day_meals(raw_day: Mapping[str, Any]) -> Dict[str, Any]:
    """Collect slot -> meal object from the supported day layouts."""
    found: Dict[str, Any] = {}
    nested = raw_day.get("meals")
    if isinstance(nested, dict):
        found.update({str(key).lower(): value for key, value in nested.items()})
    elif isinstance(nested, list):
        for item in nested:
            if not isinstance(item, dict):
                continue
            meal_type = next((item.get(key) for key in MEAL_TYPE_KEYS if isinstance(item.get(key), str)), None)
            if meal_type:
                found.setdefault(meal_type.lower(), item)
    for key, value in raw_day.items():
        lowered = str(key).lower()
        if lowered not in found and isinstance(value, dict):
            found[lowered] = value
    return found


def _coerce_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _non_negative(value: Any, warnings: List[str], label: str, *, quiet: bool = False) -> float:
    number = _coerce_number(value)
    if number is None or number < 0:
        if not quiet:
            warnings.append(f"{label} defaulted to 0 (got {value!r})")
        return 0.0
    return number


def _score(value: Any) -> Optional[float]:
    number = _coerce_number(value)
    if number is None or number < 0 or number > 10:
        return None
    return number


def _required_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _string_list(value: Any, *, split_commas: bool) -> List[str]:
    if isinstance(value, str):
        parts = value.split(",") if split_commas else [value]
        return [part.strip() for part in parts if part.strip()]
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]
