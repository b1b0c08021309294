from fastapi import FastAPI

from .api.routers import router as database_router
from .config import settings
from .observability.logging_setup import setup_logging

# Configure logging from settings (LOG_LEVEL in .env)
setup_logging()

app = FastAPI(title=settings.app_name)
app.include_router(database_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
