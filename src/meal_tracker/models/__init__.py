"""Data models."""

from meal_tracker.models.meal_record import MAX_COUNT, MIN_COUNT, MealRecord, MealSummary
from meal_tracker.models.submission import SubmissionResult, SubmissionStatus

__all__ = [
    "MAX_COUNT",
    "MIN_COUNT",
    "MealRecord",
    "MealSummary",
    "SubmissionResult",
    "SubmissionStatus",
]
