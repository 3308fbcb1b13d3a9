"""Meal store abstract interface."""

from abc import ABC, abstractmethod

from meal_tracker.models import MealRecord, SubmissionResult
from meal_tracker.store.dates import day_key


class MealStore(ABC):
    """Where meal records are written to and read back from."""

    @abstractmethod
    async def submit(self, record: MealRecord) -> SubmissionResult:
        """
        Write one record. Never raises for transport problems;
        those come back as a FAILED result.
        """
        ...

    @abstractmethod
    async def list(self) -> list[MealRecord]:
        """All stored records in append order. Empty on read failure."""
        ...

    async def has_date(self, date: str) -> bool:
        """Whether a record exists for the same day, however either date is spelled."""
        wanted = day_key(date)
        return any(day_key(r.date) == wanted for r in await self.list())
