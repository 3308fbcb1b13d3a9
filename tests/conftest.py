"""Shared fixtures: in-memory store, service and an API client wired to them."""

import pytest
from fastapi.testclient import TestClient

from meal_tracker.main import app, get_meal_service
from meal_tracker.services import MealService
from meal_tracker.store import InMemoryMealStore


@pytest.fixture
def memory_store() -> InMemoryMealStore:
    return InMemoryMealStore()


@pytest.fixture
def meal_service(memory_store: InMemoryMealStore) -> MealService:
    return MealService(memory_store, enforce_unique_dates=False)


@pytest.fixture
def client_for():
    """Build a TestClient whose handlers use the given service."""

    def _make(service: MealService) -> TestClient:
        app.dependency_overrides[get_meal_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_for, meal_service: MealService) -> TestClient:
    return client_for(meal_service)
