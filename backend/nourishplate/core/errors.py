"""Error taxonomy for meal-plan generation and lifecycle management."""
from __future__ import annotations

from typing import Sequence

SNIPPET_LIMIT = 500


class MealPlanError(Exception):
    """Base class for every error raised by the meal-plan core."""


class InvalidDuration(MealPlanError, ValueError):
    """Requested plan length is outside the supported day range."""

    def __init__(self, duration: object, min_days: int, max_days: int) -> None:
        self.duration = duration
        self.min_days = min_days
        self.max_days = max_days
        super().__init__(f"Duration must be between {min_days} and {max_days} days (got {duration!r})")


class OracleFailure(MealPlanError):
    """The model oracle could not produce an answer (network, HTTP status, timeout)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class SanitizeFailure(MealPlanError):
    """Raw model text could not be turned into parseable JSON."""

    def __init__(self, errors: Sequence[str], text: str) -> None:
        self.errors = list(errors)
        self.snippet = (text or "")[:SNIPPET_LIMIT]
        super().__init__("; ".join(self.errors) or "Unparsable model response")


class ValidationFailure(MealPlanError):
    """Parsed JSON does not satisfy the plan/meal structural contract."""

    def __init__(self, rule: str, message: str) -> None:
        self.rule = rule
        super().__init__(f"{rule}: {message}")


class PersistenceError(MealPlanError):
    """A storage read or write did not complete."""


class PlanNotFound(MealPlanError, LookupError):
    """No stored meal plan matches the requested id."""

    def __init__(self, plan_id: object) -> None:
        self.plan_id = plan_id
        super().__init__(f"Meal plan {plan_id} not found")
