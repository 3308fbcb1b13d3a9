"""Meal service: validation gate, store delegation, summaries."""

import pytest

from meal_tracker.exceptions import DuplicateDateError, StoreWriteError, ValidationError
from meal_tracker.models import MealRecord, MealSummary, SubmissionResult, SubmissionStatus
from meal_tracker.services import MealService
from meal_tracker.store import InMemoryMealStore, MealStore


class RecordingStore(MealStore):
    """Counts submissions and returns a fixed result."""

    def __init__(self, result: SubmissionResult) -> None:
        self.result = result
        self.submitted: list[MealRecord] = []

    async def submit(self, record: MealRecord) -> SubmissionResult:
        self.submitted.append(record)
        return self.result

    async def list(self) -> list[MealRecord]:
        return list(self.submitted)


@pytest.mark.asyncio
async def test_add_meal_stores_valid_record(meal_service, memory_store):
    result = await meal_service.add_meal({"date": "3/4/2024", "lunch": 2, "dinner": 1})
    assert result.status is SubmissionStatus.CONFIRMED
    assert await memory_store.list() == [MealRecord(date="3/4/2024", lunch=2, dinner=1)]


@pytest.mark.asyncio
async def test_sent_result_counts_as_success():
    store = RecordingStore(SubmissionResult(status=SubmissionStatus.SENT))
    service = MealService(store, enforce_unique_dates=False)
    result = await service.add_meal({"date": "3/4/2024", "lunch": 0, "dinner": 0})
    assert result.ok


@pytest.mark.asyncio
async def test_out_of_range_never_reaches_store():
    store = RecordingStore(SubmissionResult(status=SubmissionStatus.SENT))
    service = MealService(store, enforce_unique_dates=False)
    with pytest.raises(ValidationError):
        await service.add_meal({"date": "3/4/2024", "lunch": 3, "dinner": 1})
    assert store.submitted == []


@pytest.mark.asyncio
async def test_failed_submission_raises_store_write_error():
    store = RecordingStore(SubmissionResult.failed("form responded 500"))
    service = MealService(store, enforce_unique_dates=False)
    with pytest.raises(StoreWriteError):
        await service.add_meal({"date": "3/4/2024", "lunch": 1, "dinner": 1})


@pytest.mark.asyncio
async def test_duplicate_dates_allowed_by_default(meal_service, memory_store):
    await meal_service.add_meal({"date": "3/4/2024", "lunch": 1, "dinner": 1})
    await meal_service.add_meal({"date": "3/4/2024", "lunch": 2, "dinner": 2})
    assert len(await memory_store.list()) == 2


@pytest.mark.asyncio
async def test_duplicate_date_rejected_when_enforced(memory_store):
    service = MealService(memory_store, enforce_unique_dates=True)
    await service.add_meal({"date": "3/4/2024", "lunch": 1, "dinner": 1})
    with pytest.raises(DuplicateDateError):
        await service.add_meal({"date": "3/4/2024", "lunch": 2, "dinner": 2})
    assert len(await memory_store.list()) == 1


@pytest.mark.asyncio
async def test_summary_totals():
    store = InMemoryMealStore(
        [
            MealRecord(date="3/4/2024", lunch=2, dinner=1),
            MealRecord(date="3/5/2024", lunch=0, dinner=2),
            MealRecord(date="3/6/2024", lunch=1, dinner=0),
        ]
    )
    service = MealService(store, enforce_unique_dates=False)
    assert await service.summary() == MealSummary(total_lunches=3, total_dinners=3, total_days=3)


@pytest.mark.asyncio
async def test_summary_of_nothing(meal_service):
    assert await meal_service.summary() == MealSummary()
