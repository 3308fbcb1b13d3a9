"""Business logic services."""

from meal_tracker.services.meal_service import MealService
from meal_tracker.services.validation import validate_meal_payload

__all__ = ["MealService", "validate_meal_payload"]
