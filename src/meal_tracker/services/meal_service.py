"""Meal service - business logic between the HTTP handler and the store."""

import logging
from typing import Any

from meal_tracker.config import get_settings
from meal_tracker.exceptions import DuplicateDateError, StoreWriteError
from meal_tracker.models import MealRecord, MealSummary, SubmissionResult
from meal_tracker.services.validation import validate_meal_payload
from meal_tracker.store import MealStore

logger = logging.getLogger(__name__)


class MealService:
    """Lists, validates and adds meal entries. Separates transport from business logic."""

    def __init__(
        self,
        store: MealStore,
        *,
        enforce_unique_dates: bool | None = None,
    ) -> None:
        self._store = store
        if enforce_unique_dates is None:
            enforce_unique_dates = get_settings().enforce_unique_dates
        self._unique_dates = enforce_unique_dates

    async def list_meals(self) -> list[MealRecord]:
        """All entries in store order."""
        return await self._store.list()

    async def summary(self) -> MealSummary:
        """Totals over every entry."""
        return MealSummary.from_records(await self.list_meals())

    async def add_meal(self, payload: Any) -> SubmissionResult:
        """
        Validate and store one entry.
        Raises ValidationError (incl. DuplicateDateError) or StoreWriteError.
        """
        record = validate_meal_payload(payload)

        # Best effort only: the sheet itself does not enforce uniqueness
        if self._unique_dates and await self._store.has_date(record.date):
            logger.info("Rejected duplicate entry for %s", record.date)
            raise DuplicateDateError(record.date)

        result = await self._store.submit(record)
        if not result.ok:
            raise StoreWriteError(result.detail or "Error adding entry")
        logger.info("Meal entry for %s %s", record.date, result.status.value)
        return result
