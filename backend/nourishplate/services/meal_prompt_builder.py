"""Prompt construction for full-plan and single-meal generation."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from nourishplate.api.schemas.meal_plan import Meal, PlanPreferences
from nourishplate.core.config import settings
from nourishplate.core.errors import InvalidDuration

NONE_SPECIFIED = "None specified"
EXTENDED_PLAN_THRESHOLD = 14

SLOT_BRIEFS: Dict[str, str] = {
    "breakfast": "Quick, nutritious, energy-boosting meals for busy mornings",
    "lunch": "Portable, appealing, balanced meals that stay fresh until lunchtime",
    "dinner": "Satisfying, family-style evening meals with a protein, a vegetable, and a whole grain",
    "snack": "Healthy, satisfying snacks for afternoon energy",
}

VARIETY_EXAMPLES: Dict[str, str] = {
    "breakfast": "Pancakes -> Oatmeal -> Eggs -> Toast -> Smoothie -> Quesadilla -> Parfait",
    "lunch": "Wrap -> Sandwich -> Pasta -> Pizza -> Salad -> Bento -> Soup",
    "dinner": "Stir-fry -> Tacos -> Curry -> Stew -> Baked fish -> Meatballs -> Fried rice",
    "snack": "Apple -> Yogurt -> Crackers -> Trail mix -> Veggies -> Banana -> Granola bar",
}


def validate_duration(duration: Any) -> int:
    """Return ``duration`` when it is a whole number of days within the configured bounds."""
    min_days, max_days = settings.plan_min_days, settings.plan_max_days
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidDuration(duration, min_days, max_days)
    if duration < min_days or duration > max_days:
        raise InvalidDuration(duration, min_days, max_days)
    return duration


def build_plan_prompt(preferences: PlanPreferences, subject_name: str, duration: int) -> str:
    """Render the full-plan request for ``duration`` days."""
    duration = validate_duration(duration)
    slots = list(preferences.meal_slots)
    targets = _nutrition_targets(preferences.age)
    slot_lines = "\n".join(
        f"{index}. {slot.upper()}: {SLOT_BRIEFS[slot]}" for index, slot in enumerate(slots, start=1)
    )
    example_lines = "\n".join(f"- {slot.capitalize()}: {VARIETY_EXAMPLES[slot]}" for slot in slots)
    slot_names = ", ".join(slots)

    return (
        f"Generate a comprehensive {duration}-day meal plan for {subject_name}, age {preferences.age}.\n\n"
        f"{_render_profile(preferences, subject_name)}\n\n"
        "CRITICAL VARIETY REQUIREMENTS:\n"
        "- EVERY SINGLE DAY MUST HAVE COMPLETELY DIFFERENT MEALS\n"
        f"- NO MEAL SHOULD BE REPEATED ACROSS THE {duration} DAYS, in any slot ({slot_names})\n"
        "- Use different cooking methods, ingredients, and cuisines for variety\n"
        "- Ensure no two days have similar meal combinations\n\n"
        "MEAL REQUIREMENTS:\n"
        f"{slot_lines}\n\n"
        "GUIDELINES:\n"
        f"- Age-appropriate portions and nutrition for a {preferences.age}-year-old\n"
        "- Never include any listed allergen, and tag every meal's real allergens in \"allergens\"\n"
        "- Balanced nutrition with adequate protein, healthy carbs, and essential vitamins\n"
        "- Practical preparation and storage considerations, with prep tips for busy parents\n\n"
        "NUTRITIONAL TARGETS (per day):\n"
        f"- Calories: {targets['calories']}\n"
        f"- Protein: {targets['protein']}\n"
        f"- Calcium: {targets['calcium']}\n"
        f"- Iron: {targets['iron']}\n\n"
        "Return ONLY valid JSON with this exact structure:\n"
        f"{_plan_contract(subject_name, duration, slots)}\n\n"
        f"CRITICAL: Generate ALL {duration} days with complete meal details for {slot_names}. "
        "No placeholders or shortcuts.\n\n"
        "VARIETY ENFORCEMENT:\n"
        "- Day 2 must have different meals from Day 1, Day 3 different from Days 1 and 2, and so on\n"
        "- NO MEAL REPETITION ALLOWED ACROSS ANY DAYS OR SLOTS\n\n"
        "EXAMPLES OF VARIETY:\n"
        f"{example_lines}\n\n"
        f"{_extended_guidance(duration)}"
        f"Generate exactly {duration} days with this level of variety."
    )


def build_meal_prompt(
    original_meal: Meal,
    slot: str,
    preferences: PlanPreferences,
    subject_name: str,
) -> str:
    """Render the single-meal replacement request."""
    contract = json.dumps(_meal_example(slot), indent=2, ensure_ascii=False)
    return (
        f"Generate an alternative {slot} meal for {subject_name} (age {preferences.age}) to replace this meal:\n\n"
        f"ORIGINAL MEAL: {original_meal.name}\n"
        f"MEAL TYPE: {slot}\n"
        f"ORIGINAL CALORIES: {original_meal.calories}\n\n"
        "REQUIREMENTS:\n"
        "- Similar nutritional profile to the original meal\n"
        f"- Age-appropriate for a {preferences.age}-year-old\n"
        f"- {SLOT_BRIEFS[slot]}\n"
        f"- Must be different from {original_meal.name}\n"
        f"- Avoid: {_join(preferences.allergies)}\n"
        f"- Consider dislikes: {_join(preferences.dislikes)}\n"
        f"- Include favorites if possible: {_join(preferences.favorites)}\n"
        f"- Dietary restrictions: {_join(preferences.dietary_restrictions)}\n\n"
        "Return ONLY valid JSON for ONE meal object with this exact structure:\n"
        f"{contract}"
    )


def _render_profile(preferences: PlanPreferences, subject_name: str) -> str:
    lines: List[str] = [
        "PROFILE:",
        f"- Name: {subject_name}",
        f"- Age: {preferences.age} years",
        f"- Allergies: {_join(preferences.allergies)}",
        f"- Dislikes: {_join(preferences.dislikes)}",
        f"- Favorites: {_join(preferences.favorites)}",
        f"- Dietary Restrictions: {_join(preferences.dietary_restrictions)}",
        f"- School Lunch Policy: {preferences.school_lunch_policy or 'Packed lunch allowed'}",
        f"- Prep Time Limit: {preferences.prep_time_limit or '15-20 minutes'}",
        f"- Budget Range: {preferences.budget_range or 'Moderate'}",
        f"- Special Requirements: {preferences.special_requirements or NONE_SPECIFIED}",
    ]
    return "\n".join(lines)


def _nutrition_targets(age: int) -> Dict[str, str]:
    if age <= 5:
        return {"calories": "1200-1400", "protein": "16-20g", "calcium": "700mg", "iron": "7mg"}
    if age <= 8:
        return {"calories": "1400-1800", "protein": "20-28g", "calcium": "1000mg", "iron": "10mg"}
    if age <= 18:
        return {"calories": "1800-2200", "protein": "28-35g", "calcium": "1300mg", "iron": "15mg"}
    return {"calories": "1800-2500", "protein": "46-56g", "calcium": "1000mg", "iron": "8-18mg"}


def _plan_contract(subject_name: str, duration: int, slots: Sequence[str]) -> str:
    day: Dict[str, Any] = {"day": 1, "date": "2024-01-01"}
    for slot in slots:
        day[slot] = _meal_example(slot)
    day["total_calories"] = 1200
    day["nutrition_summary"] = {"protein": 45, "carbs": 150, "fat": 40, "fiber": 20, "calcium": 800, "iron": 8}
    contract = {
        "title": f"Meal Plan for {subject_name}",
        "description": f"A {duration}-day meal plan designed specifically for {subject_name}",
        "duration": f"{duration} days",
        "daily_plans": [day],
    }
    return json.dumps(contract, indent=2, ensure_ascii=False)


def _meal_example(slot: str) -> Dict[str, Any]:
    return {
        "name": "Meal name",
        "description": "Detailed description",
        "type": slot,
        "calories": 300,
        "prep_time": "10 min",
        "difficulty": "easy",
        "ingredients": ["ingredient1", "ingredient2"],
        "instructions": ["step1", "step2"],
        "nutrition": {"protein": 12, "carbs": 35, "fat": 8, "fiber": 4, "calcium": 200, "iron": 2},
        "allergens": ["milk"],
        "kid_friendly_score": 9,
        "portability_score": 7,
        "prep_tips": ["tip1", "tip2"],
        "storage_tips": ["tip1", "tip2"],
        "emoji": "🍽️",
        "category": slot,
    }


def _extended_guidance(duration: int) -> str:
    if duration <= EXTENDED_PLAN_THRESHOLD:
        return ""
    return (
        f"EXTENDED PLAN REQUIREMENTS ({duration} days):\n"
        "- Week 1: Focus on familiar, well-liked meals\n"
        "- Week 2: Introduce more adventurous flavors and textures\n"
        "- Week 3+: Include seasonal ingredients and cultural variety\n"
        "- Consider weekly themes (Italian week, Asian week, etc.)\n"
        f"- Ensure nutritional balance across the entire {duration}-day period\n\n"
    )


def _join(values: Sequence[str]) -> str:
    return ", ".join(values) if values else NONE_SPECIFIED
