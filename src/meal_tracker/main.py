"""FastAPI application - meal endpoints, health and index page."""

import json
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse

from meal_tracker.config import get_settings
from meal_tracker.exceptions import ValidationError
from meal_tracker.services import MealService
from meal_tracker.store import create_store

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching entries"
ADD_ERROR = "Error adding entry"
ADD_SUCCESS = "Entry added successfully"

STATIC_DIR = Path(__file__).parent / "static"

# Dependency injection - created at startup
_service: MealService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup."""
    global _service
    _service = MealService(create_store())
    yield
    _service = None


def get_meal_service() -> MealService:
    """Service created at startup, or on first use when the app runs without lifespan."""
    global _service
    if _service is None:
        _service = MealService(create_store())
    return _service


app = FastAPI(
    title="Meal Tracker",
    description="Log daily lunch and dinner counts to a Google Sheet",
    version="0.1.0",
    lifespan=lifespan,
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "ok"}


@app.get("/meals")
async def list_meals(service: MealService = Depends(get_meal_service)) -> JSONResponse:
    """All entries as [{date, lunch, dinner}]."""
    try:
        records = await service.list_meals()
    except Exception as e:
        logger.exception("Error fetching entries: %s", e)
        return _error(FETCH_ERROR, 500)
    return JSONResponse([r.model_dump() for r in records])


@app.get("/meals/summary")
async def meals_summary(service: MealService = Depends(get_meal_service)) -> JSONResponse:
    """Total lunches, dinners and days logged."""
    try:
        summary = await service.summary()
    except Exception as e:
        logger.exception("Error fetching entries: %s", e)
        return _error(FETCH_ERROR, 500)
    return JSONResponse(summary.model_dump())


@app.post("/meals")
async def add_meal(request: Request, service: MealService = Depends(get_meal_service)) -> JSONResponse:
    """
    Add one entry. 400 with the validation message for bad input,
    500 for store failures and anything unexpected.
    """
    try:
        payload = json.loads(await request.body())
        await service.add_meal(payload)
    except ValidationError as e:
        return _error(e.message, 400)
    except Exception as e:
        logger.exception("Error adding entry: %s", e)
        return _error(ADD_ERROR, 500)
    return JSONResponse({"message": ADD_SUCCESS})


@app.get("/", include_in_schema=False)
def root() -> FileResponse:
    index_file = STATIC_DIR / "index.html"
    if not index_file.exists():
        raise HTTPException(status_code=404, detail="frontend not found")
    return FileResponse(index_file)
