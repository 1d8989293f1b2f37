from datetime import date

import pytest

from nourishplate.api.schemas.meal_plan import DailyPlan, Meal, NutritionInfo, PlanPreferences
from nourishplate.services.fallback_planner import synthesize_fallback_plan
from nourishplate.services.nutrition import average_daily_calories, plan_totals, recompute_day, replace_meal


def _meal(slot: str, calories: int, protein: float, iron: float = 1.0) -> Meal:
    return Meal(name=f"{slot} meal", type=slot, calories=calories, nutrition=NutritionInfo(protein=protein, iron=iron))


def _day() -> DailyPlan:
    return DailyPlan(
        day=1,
        date=date(2026, 5, 4),
        meals={
            "breakfast": _meal("breakfast", 300, 12.1),
            "lunch": _meal("lunch", 450, 20.2),
            "snack": _meal("snack", 150, 4.0),
        },
        total_calories=9999,
    )


def test_recompute_replaces_stale_totals_with_exact_sums():
    day = recompute_day(_day())

    assert day.total_calories == 900
    assert day.nutrition_summary.protein == pytest.approx(36.3)
    assert day.nutrition_summary.iron == pytest.approx(3.0)


def test_replacing_one_slot_changes_only_that_contribution():
    before = recompute_day(_day())

    after = replace_meal(before, "lunch", _meal("lunch", 520, 25.0))

    assert after.total_calories - before.total_calories == 520 - 450
    assert after.total_calories == 300 + 520 + 150
    assert after.meals["breakfast"] == before.meals["breakfast"]
    assert after.meals["snack"] == before.meals["snack"]
    assert before.meals["lunch"].calories == 450


def test_replace_meal_rejects_unknown_slot():
    with pytest.raises(ValueError):
        replace_meal(_day(), "dinner", _meal("dinner", 600, 30))


def test_plan_totals_sum_days_on_demand():
    plan = synthesize_fallback_plan(PlanPreferences(), "Mia", 4)

    calories, nutrients = plan_totals(plan)

    assert calories == sum(day.total_calories for day in plan.daily_plans)
    assert nutrients.calcium == pytest.approx(sum(day.nutrition_summary.calcium for day in plan.daily_plans))
    assert average_daily_calories(plan) == round(calories / 4, 1)
