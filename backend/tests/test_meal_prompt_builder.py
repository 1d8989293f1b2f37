import json

import pytest

from nourishplate.api.schemas.meal_plan import Meal, PlanPreferences
from nourishplate.core.errors import InvalidDuration
from nourishplate.services.meal_prompt_builder import build_meal_prompt, build_plan_prompt, validate_duration


@pytest.mark.parametrize("duration", [1, 7, 90])
def test_valid_durations_pass(duration):
    assert validate_duration(duration) == duration


@pytest.mark.parametrize("duration", [0, -3, 91, 7.5, "7", True, None])
def test_invalid_durations_raise(duration):
    with pytest.raises(InvalidDuration):
        validate_duration(duration)


def test_plan_prompt_lists_preferences_with_fallback_phrases():
    prefs = PlanPreferences(kid_age=6, allergies="peanuts, Peanuts, shellfish", favorites=["pasta"])

    prompt = build_plan_prompt(prefs, "Mia", 5)

    assert "- Allergies: peanuts, shellfish" in prompt
    assert "- Dislikes: None specified" in prompt
    assert "- Favorites: pasta" in prompt
    assert "- School Lunch Policy: Packed lunch allowed" in prompt
    assert "- Special Requirements: None specified" in prompt
    assert "Calories: 1400-1800" in prompt
    assert "NO MEAL SHOULD BE REPEATED ACROSS THE 5 DAYS" in prompt


def test_plan_prompt_embeds_json_contract_for_requested_slots():
    prefs = PlanPreferences(age=30, meal_slots=["lunch", "dinner"])

    prompt = build_plan_prompt(prefs, "Sam", 3)

    start = prompt.index("Return ONLY valid JSON with this exact structure:\n") + len(
        "Return ONLY valid JSON with this exact structure:\n"
    )
    contract, _ = json.JSONDecoder().raw_decode(prompt[start:])
    day = contract["daily_plans"][0]
    assert set(contract) == {"title", "description", "duration", "daily_plans"}
    assert "lunch" in day and "dinner" in day and "breakfast" not in day
    assert "1. LUNCH:" in prompt and "2. DINNER:" in prompt


def test_extended_guidance_only_for_long_plans():
    prefs = PlanPreferences()

    assert "EXTENDED PLAN REQUIREMENTS" not in build_plan_prompt(prefs, "Mia", 14)
    long_prompt = build_plan_prompt(prefs, "Mia", 21)
    assert "EXTENDED PLAN REQUIREMENTS (21 days)" in long_prompt
    assert "Week 3+" in long_prompt


def test_plan_prompt_validates_duration():
    with pytest.raises(InvalidDuration):
        build_plan_prompt(PlanPreferences(), "Mia", 120)


def test_meal_prompt_targets_single_meal_and_original():
    prefs = PlanPreferences(allergies=["peanuts"], dislikes=["mushrooms"])
    original = Meal(name="Rainbow Veggie Wrap", type="lunch", calories=320)

    prompt = build_meal_prompt(original, "lunch", prefs, "Mia")

    assert "ORIGINAL MEAL: Rainbow Veggie Wrap" in prompt
    assert "ORIGINAL CALORIES: 320" in prompt
    assert "- Avoid: peanuts" in prompt
    assert "ONE meal object" in prompt
    assert "daily_plans" not in prompt
