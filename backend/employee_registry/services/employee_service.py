"""Employee Service - lookup-or-fail, partial update, hash-before-save, checked delete.

Invariants:
    - create() hashes the password before the row reaches the store
    - update() copies names, email and role only; password and id are untouched
    - get_by_id/update/delete raise EmployeeNotFoundError for an absent id
    - delete_many() is best effort: absent ids are ignored, nothing is reported
    - An email already held by another employee raises DuplicateEmailError
"""

import logging
from typing import Sequence

from employee_registry.core.domain_types import EmployeeId
from employee_registry.core.errors import DuplicateEmailError, EmployeeNotFoundError
from employee_registry.core.repository_protocols import (
    EmployeeRepository, PasswordHasher,
)
from employee_registry.models.employee import Employee
from employee_registry.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee use cases, one method per API operation."""

    def __init__(self, repository: EmployeeRepository, hasher: PasswordHasher):
        self._repository = repository
        self._hasher = hasher

    async def create(self, data: EmployeeCreate) -> Employee:
        """Register a new employee. The stored password is a hash of data.password."""
        await self._ensure_email_available(data.email)
        employee = Employee(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password=self._hasher.hash(data.password),
            role=data.role,
        )
        saved = await self._repository.save(employee)
        logger.info("Employee registered", extra={"employee_id": saved.id})
        return saved

    async def list_all(self) -> Sequence[Employee]:
        return await self._repository.get_all()

    async def get_by_id(self, employee_id: EmployeeId) -> Employee:
        employee = await self._repository.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def update(self, employee_id: EmployeeId, data: EmployeeUpdate) -> Employee:
        """Overwrite profile fields of an existing employee."""
        employee = await self.get_by_id(employee_id)
        if data.email != employee.email:
            await self._ensure_email_available(data.email, owner_id=employee_id)

        employee.first_name = data.first_name
        employee.last_name = data.last_name
        employee.email = data.email
        employee.role = data.role
        # password is never copied on update

        saved = await self._repository.save(employee)
        logger.info("Employee updated", extra={"employee_id": employee_id})
        return saved

    async def delete(self, employee_id: EmployeeId) -> None:
        if not await self._repository.exists_by_id(employee_id):
            raise EmployeeNotFoundError(employee_id)
        await self._repository.delete_by_id(employee_id)
        logger.info("Employee deleted", extra={"employee_id": employee_id})

    async def delete_many(self, employee_ids: Sequence[EmployeeId]) -> None:
        await self._repository.delete_all_by_id(employee_ids)

    async def _ensure_email_available(
        self, email: str, owner_id: EmployeeId | None = None,
    ) -> None:
        existing = await self._repository.get_by_email(email)
        if existing is not None and existing.id != owner_id:
            raise DuplicateEmailError(email)
