"""Employee Routes - HTTP surface of the registry.

Invariants:
    - Payloads are validated by Pydantic before the handler body runs
    - Handlers never catch domain errors: they reach api/error_handlers.py
    - Batch delete is a POST with a JSON array body (clients may drop DELETE bodies)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Response, status
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from employee_registry.config import get_settings
from employee_registry.core.domain_types import (
    EmployeeId, MAX_EMPLOYEE_ID, MIN_EMPLOYEE_ID,
)
from employee_registry.infrastructure.database import get_db
from employee_registry.infrastructure.employee_repository import (
    SqlAlchemyEmployeeRepository,
)
from employee_registry.infrastructure.password_hasher import get_password_hasher
from employee_registry.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate,
)
from employee_registry.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix=get_settings().api_prefix, tags=["employees"])

# out-of-range ids are rejected as input errors before reaching the driver
PathEmployeeId = Annotated[
    int, Path(alias="id", ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
]
BatchEmployeeId = Annotated[int, Field(ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID)]


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Wire the service to a request-scoped repository."""
    return EmployeeService(
        SqlAlchemyEmployeeRepository(db), get_password_hasher(),
    )


@router.post(
    "/register", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Register a new employee."""
    return await service.create(body)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """List every employee in store order."""
    return await service.list_all()


@router.get("/{id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: PathEmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.get_by_id(EmployeeId(employee_id))


@router.put("/{id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: PathEmployeeId,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Update profile fields. A password in the body is ignored."""
    return await service.update(EmployeeId(employee_id), body)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: PathEmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    await service.delete(EmployeeId(employee_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/batch/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employees(
    employee_ids: list[BatchEmployeeId] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete every listed employee that exists; absent ids are ignored."""
    await service.delete_many([EmployeeId(i) for i in employee_ids])
    return Response(status_code=status.HTTP_204_NO_CONTENT)
