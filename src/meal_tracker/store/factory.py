"""Store factory - creates the Sheets or in-memory store based on config."""

import logging

from meal_tracker.config import get_settings
from meal_tracker.store.base import MealStore
from meal_tracker.store.memory_store import InMemoryMealStore
from meal_tracker.store.sheets_store import SheetsMealStore

logger = logging.getLogger(__name__)


def create_store() -> MealStore:
    """
    Create the meal store.
    Uses Google Sheets when SHEET_ID and FORM_ID are set; otherwise in-memory.
    """
    settings = get_settings()
    if settings.uses_sheets:
        return SheetsMealStore()
    logger.warning("SHEET_ID/FORM_ID not configured, entries are kept in memory only")
    return InMemoryMealStore()
