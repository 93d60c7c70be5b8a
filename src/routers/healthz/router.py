import logging

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from src.config.database import async_session_manager, store_errors

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"


class DatabaseHealthResponse(BaseModel):
    status: str
    database: str


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness: the API process is up."""
    return HealthCheckResponse(status="healthy")


@router.get("/db", response_model=DatabaseHealthResponse)
async def database_health_check() -> DatabaseHealthResponse:
    """
    Readiness: the invitation store answers a trivial query.

    An unreachable store surfaces as a 503 through the StoreError handler.
    """
    with store_errors():
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    return DatabaseHealthResponse(status="healthy", database="reachable")
