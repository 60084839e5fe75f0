"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports the application version and whether the database answers.
"""

import logging

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.interfaces.qa.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_status(request: Request) -> str:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return "not configured"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health check failed.", exc_info=True)
        return "unavailable"
    return "ok"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database reachability.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.version,
        database=_database_status(request),
    )
