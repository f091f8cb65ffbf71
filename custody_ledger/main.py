import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router, withdrawal_router
from .core.config import get_settings
from .core.db import init_db

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(
        "custody.started",
        extra={"max_accounts_per_party": settings.max_accounts_per_party},
    )
    yield

app = FastAPI(
    title=settings.app_name,
    description="Jointly owned accounts whose withdrawals need every other owner's approval.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(accounts_router)
app.include_router(withdrawal_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str | int]:
    return {
        "status": "ok",
        "service": settings.app_name,
        "max_accounts_per_party": settings.max_accounts_per_party,
    }
