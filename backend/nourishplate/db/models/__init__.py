"""ORM models exposed for metadata discovery."""
from nourishplate.db.models.meal_plan import MealPlanRecord
from nourishplate.db.models.plan_action_log import PlanActionLog

__all__ = [
    "MealPlanRecord",
    "PlanActionLog",
]
