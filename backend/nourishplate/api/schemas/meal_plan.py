"""Schemas for meal plans, their days and meals."""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Literal, Optional
from uuid import UUID, uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

MealSlot = Literal["breakfast", "lunch", "dinner", "snack"]
SubjectType = Literal["kid", "adult"]
PlanSource = Literal["ai", "fallback"]

SLOT_ORDER: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")
DEFAULT_KID_SLOTS: tuple[str, ...] = ("breakfast", "lunch", "snack")
DEFAULT_ADULT_SLOTS: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")
NUTRIENT_FIELDS: tuple[str, ...] = ("protein", "carbs", "fat", "fiber", "calcium", "iron")


class NutritionInfo(BaseModel):
    """Macro (grams) and micro (milligrams) nutrient amounts."""

    model_config = ConfigDict(extra="ignore")

    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)
    calcium: float = Field(default=0, ge=0)
    iron: float = Field(default=0, ge=0)


class Meal(BaseModel):
    """A single meal occupying one slot of one day."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str
    description: str = ""
    type: MealSlot
    calories: int = Field(default=0, ge=0)
    prep_time: str = ""
    difficulty: Literal["easy", "medium", "hard"] = "easy"
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    nutrition: NutritionInfo = Field(default_factory=NutritionInfo)
    allergens: List[str] = Field(default_factory=list)
    kid_friendly_score: Optional[float] = Field(default=None, ge=0, le=10)
    portability_score: Optional[float] = Field(default=None, ge=0, le=10)
    prep_tips: List[str] = Field(default_factory=list)
    storage_tips: List[str] = Field(default_factory=list)
    emoji: str = ""
    category: str = ""


class DailyPlan(BaseModel):
    """One calendar day; totals are a cache derived from the slot meals."""

    day: int = Field(..., ge=1)
    date: dt.date
    meals: Dict[MealSlot, Meal]
    total_calories: int = 0
    nutrition_summary: NutritionInfo = Field(default_factory=NutritionInfo)


def _clean_string_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValueError("expected a list of strings")
    cleaned: List[str] = []
    for item in value:
        text = str(item).strip()
        if text and text.lower() not in {entry.lower() for entry in cleaned}:
            cleaned.append(text)
    return cleaned


class PlanPreferences(BaseModel):
    """Generation input for a subject; frozen once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age: int = Field(default=8, ge=1, le=120, validation_alias=AliasChoices("age", "kid_age"))
    allergies: List[str] = Field(default_factory=list)
    dislikes: List[str] = Field(default_factory=list)
    favorites: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    school_lunch_policy: Optional[str] = None
    prep_time_limit: Optional[str] = None
    budget_range: Optional[str] = None
    special_requirements: Optional[str] = None
    meal_slots: List[MealSlot] = Field(default_factory=lambda: list(DEFAULT_KID_SLOTS))

    @field_validator("allergies", "dislikes", "favorites", "dietary_restrictions", mode="before")
    @classmethod
    def _normalize_lists(cls, value):
        return _clean_string_list(value)

    @field_validator("meal_slots")
    @classmethod
    def _unique_slots(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("At least one meal slot is required")
        seen: List[str] = []
        for slot in value:
            if slot not in seen:
                seen.append(slot)
        return sorted(seen, key=SLOT_ORDER.index)


class MealPlan(BaseModel):
    """A complete generated plan covering exactly ``duration`` contiguous days."""

    id: UUID = Field(default_factory=uuid4)
    subject_id: Optional[UUID] = None
    subject_type: SubjectType = "kid"
    title: str
    description: str
    duration: int = Field(..., ge=1)
    created_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
    preferences: PlanPreferences
    daily_plans: List[DailyPlan]
    source: PlanSource = "ai"

    @model_validator(mode="after")
    def _check_days(self) -> "MealPlan":
        if len(self.daily_plans) != self.duration:
            raise ValueError(f"Plan has {len(self.daily_plans)} days but duration is {self.duration}")
        for expected, day in enumerate(self.daily_plans, start=1):
            if day.day != expected:
                raise ValueError(f"Day indices must be contiguous from 1; found {day.day} at position {expected}")
            missing = [slot for slot in self.preferences.meal_slots if slot not in day.meals]
            if missing:
                raise ValueError(f"Day {day.day} is missing meals for {', '.join(missing)}")
        return self

    @property
    def slots(self) -> List[str]:
        return list(self.preferences.meal_slots)


class GeneratePlanRequest(BaseModel):
    subject_id: UUID
    subject_type: SubjectType = "kid"
    subject_name: str = Field(..., min_length=1, max_length=120)
    duration: int = 7
    preferences: PlanPreferences = Field(default_factory=PlanPreferences)
    created_by: Optional[UUID] = None
    save: bool = True

    @model_validator(mode="after")
    def _adult_default_slots(self) -> "GeneratePlanRequest":
        # Adults get dinner unless the caller picked slots explicitly.
        if self.subject_type == "adult" and "meal_slots" not in self.preferences.model_fields_set:
            self.preferences = self.preferences.model_copy(update={"meal_slots": list(DEFAULT_ADULT_SLOTS)})
        return self


class MealPlanResponse(BaseModel):
    plan: MealPlan
    saved: bool
    is_active: bool
    request_id: str


class MealPlanSummary(BaseModel):
    id: UUID
    subject_id: UUID
    title: str
    duration: int
    is_active: bool
    source: PlanSource
    average_daily_calories: float
    created_at: dt.datetime
    updated_at: dt.datetime


class MealPlanListResponse(BaseModel):
    subject_id: UUID
    items: List[MealPlanSummary]
    request_id: str


class MealPlanDetailResponse(BaseModel):
    id: UUID
    subject_id: UUID
    is_active: bool
    source: PlanSource
    created_at: dt.datetime
    updated_at: dt.datetime
    plan: MealPlan
    request_id: str


class ActivationResponse(BaseModel):
    id: UUID
    subject_id: UUID
    is_active: bool
    request_id: str


class ReplaceMealRequest(BaseModel):
    day: int = Field(..., ge=1)
    slot: MealSlot
    subject_name: str = Field(..., min_length=1, max_length=120)


class ReplaceMealResponse(BaseModel):
    plan_id: UUID
    day: DailyPlan
    replaced_meal: str
    request_id: str
