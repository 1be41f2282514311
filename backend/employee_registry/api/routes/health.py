"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 unless the database answers AND the
      employees table is queryable (missing migration counts as not ready)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import select

from employee_registry.config import get_settings
from employee_registry.core.errors import DatabaseError
from employee_registry.infrastructure import database
from employee_registry.models.employee import Employee

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-registry-api",
        "version": "1.0.0",
        "api_prefix": get_settings().api_prefix,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe - database connectivity plus the employees table."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")
    if not await _employees_table_ready(manager):
        return _not_ready("employees_table_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "employees_table": "present"},
    }


async def _employees_table_ready(manager: database.DatabaseSessionManager) -> bool:
    try:
        async with manager.session() as db:
            await db.execute(select(Employee.id).limit(1))
        return True
    except DatabaseError as e:
        logger.error(f"Employees table check failed: {e}")
        return False


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
