"""Public status endpoint for load balancers and uptime checks."""
import logging
from typing import Literal

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Service status. `degraded` means the API is up but the store is not."""

    status: Literal["healthy", "degraded"]
    database: Literal["ok", "unreachable"]
    version: str


async def database_reachable(db: AsyncSession) -> bool:
    """Run a trivial query; False if the store cannot answer it."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Database ping failed")
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Report API and database status. Needs no session token."""
    reachable = await database_reachable(db)
    return HealthResponse(
        status="healthy" if reachable else "degraded",
        database="ok" if reachable else "unreachable",
        version=request.app.version,
    )
