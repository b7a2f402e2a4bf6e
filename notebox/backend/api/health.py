"""
Health Check Endpoints.

Provides liveness and readiness checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter
from sqlalchemy import text

from notebox.backend.core.database import get_session_factory
from notebox.backend.core.exceptions import DatabaseError
from notebox.backend.core.logging import get_logger
from notebox.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_database() -> dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict with status, latency, and optional error message
    """
    start = utc_now()
    try:
        async with get_session_factory()() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {"status": "unhealthy", "error": str(e)}

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {"status": "healthy", "latency_ms": latency_ms}


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check. Returns healthy while the process is serving."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def health_ready() -> dict[str, Any]:
    """
    Readiness check.

    Raises:
        DatabaseError: If the database cannot be reached (503)
    """
    database = await check_database()
    if database["status"] != "healthy":
        raise DatabaseError("Database unavailable")

    return {
        "status": "healthy",
        "checks": {"database": database},
        "timestamp": utc_now().isoformat(),
    }
