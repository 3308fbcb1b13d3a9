"""Record store adapters."""

from meal_tracker.store.base import MealStore
from meal_tracker.store.csv_export import parse_export
from meal_tracker.store.factory import create_store
from meal_tracker.store.memory_store import InMemoryMealStore
from meal_tracker.store.sheets_store import SheetsMealStore, to_form_date

__all__ = [
    "InMemoryMealStore",
    "MealStore",
    "SheetsMealStore",
    "create_store",
    "parse_export",
    "to_form_date",
]
