"""Day and plan nutrition aggregation.

Day totals are a projection of the slot meals: they are always rebuilt from
scratch, never patched incrementally.
"""
from __future__ import annotations

from typing import Iterable, Tuple

from nourishplate.api.schemas.meal_plan import NUTRIENT_FIELDS, DailyPlan, Meal, MealPlan, NutritionInfo


def sum_nutrition(meals: Iterable[Meal]) -> Tuple[int, NutritionInfo]:
    """Return (calories, nutrition) summed across the given meals."""
    calories = 0
    totals = {field: 0.0 for field in NUTRIENT_FIELDS}
    for meal in meals:
        calories += meal.calories
        for field in NUTRIENT_FIELDS:
            totals[field] += getattr(meal.nutrition, field)
    return calories, NutritionInfo(**{field: _tidy(value) for field, value in totals.items()})


def recompute_day(day: DailyPlan) -> DailyPlan:
    """Return a copy of ``day`` whose aggregates equal the sum of its meals."""
    calories, summary = sum_nutrition(day.meals.values())
    return day.model_copy(update={"total_calories": calories, "nutrition_summary": summary})


def replace_meal(day: DailyPlan, slot: str, meal: Meal) -> DailyPlan:
    """Swap the meal in ``slot`` and recompute the day totals."""
    if slot not in day.meals:
        raise ValueError(f"Day {day.day} has no {slot} slot")
    meals = dict(day.meals)
    meals[slot] = meal
    return recompute_day(day.model_copy(update={"meals": meals}))


def plan_totals(plan: MealPlan) -> Tuple[int, NutritionInfo]:
    """Sum calories and nutrients over every day of the plan (computed on demand)."""
    calories = 0
    totals = {field: 0.0 for field in NUTRIENT_FIELDS}
    for day in plan.daily_plans:
        day_calories, day_summary = sum_nutrition(day.meals.values())
        calories += day_calories
        for field in NUTRIENT_FIELDS:
            totals[field] += getattr(day_summary, field)
    return calories, NutritionInfo(**{field: _tidy(value) for field, value in totals.items()})


def average_daily_calories(plan: MealPlan) -> float:
    if not plan.daily_plans:
        return 0.0
    calories, _ = plan_totals(plan)
    return round(calories / len(plan.daily_plans), 1)


def _tidy(value: float) -> float:
    # Float sums of whole-gram values drift (0.1 + 0.2); keep two decimals.
    return round(value, 2)
