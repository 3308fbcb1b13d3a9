"""Run with: python -m meal_tracker"""

import uvicorn

from meal_tracker.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "meal_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
