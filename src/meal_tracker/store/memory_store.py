"""Process-local store for development and tests."""

import logging

from meal_tracker.models import MealRecord, SubmissionResult, SubmissionStatus
from meal_tracker.store.base import MealStore

logger = logging.getLogger(__name__)


class InMemoryMealStore(MealStore):
    """Keeps records in a list. Lost on restart."""

    def __init__(self, records: list[MealRecord] | None = None) -> None:
        self._records: list[MealRecord] = list(records or [])

    async def submit(self, record: MealRecord) -> SubmissionResult:
        self._records.append(record.model_copy())
        logger.info("Stored meal entry in memory: %s", record.date)
        return SubmissionResult(status=SubmissionStatus.CONFIRMED)

    async def list(self) -> list[MealRecord]:
        return [r.model_copy() for r in self._records]
