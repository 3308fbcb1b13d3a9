"""Meal record data model."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

# Range accepted for new entries. Stored rows are reported as found.
MIN_COUNT = 0
MAX_COUNT = 2


class MealRecord(BaseModel):
    """One day's lunch and dinner counts."""

    date: str = Field(..., min_length=1, description="Calendar date as entered, e.g. 3/4/2024")
    lunch: int = Field(default=0, description="Lunches eaten")
    dinner: int = Field(default=0, description="Dinners eaten")


class MealSummary(BaseModel):
    """Running totals over a set of records."""

    total_lunches: int = 0
    total_dinners: int = 0
    total_days: int = 0

    @classmethod
    def from_records(cls, records: Iterable[MealRecord]) -> "MealSummary":
        summary = cls()
        for r in records:
            summary.total_lunches += r.lunch
            summary.total_dinners += r.dinner
            summary.total_days += 1
        return summary
