"""Request payload validation for new meal entries."""

import math
from typing import Any

from meal_tracker.exceptions import COUNT_OUT_OF_RANGE, INVALID_INPUT, ValidationError
from meal_tracker.models import MAX_COUNT, MIN_COUNT, MealRecord


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_count(value: float) -> int:
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError(INVALID_INPUT)
    return int(value)


def validate_meal_payload(payload: Any) -> MealRecord:
    """
    Check shape first, then range. Raises ValidationError with the
    client-facing message.
    """
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_INPUT)
    date = payload.get("date")
    lunch = payload.get("lunch")
    dinner = payload.get("dinner")
    if not date or not _is_number(lunch) or not _is_number(dinner):
        raise ValidationError(INVALID_INPUT)

    lunch_count = _as_count(lunch)
    dinner_count = _as_count(dinner)
    for count in (lunch_count, dinner_count):
        if count < MIN_COUNT or count > MAX_COUNT:
            raise ValidationError(COUNT_OUT_OF_RANGE)

    return MealRecord(date=str(date), lunch=lunch_count, dinner=dinner_count)
