"""Employee Repository - SQLAlchemy implementation of the Record Store contract.

Invariants:
    - Every mutating call commits its own unit of work
    - A unique-constraint violation on save surfaces as DuplicateEmailError
    - delete_all_by_id ignores ids with no row (best effort, nothing reported)
"""

import logging
from typing import Sequence

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_registry.core.domain_types import EmployeeId
from employee_registry.core.errors import DuplicateEmailError
from employee_registry.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlAlchemyEmployeeRepository:
    """Employee persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return await self._db.get(Employee, employee_id)

    async def get_all(self) -> Sequence[Employee]:
        result = await self._db.execute(select(Employee).order_by(Employee.id))
        return result.scalars().all()

    async def get_by_email(self, email: str) -> Employee | None:
        result = await self._db.execute(
            select(Employee).where(Employee.email == email),
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, employee_id: EmployeeId) -> bool:
        result = await self._db.execute(
            select(exists().where(Employee.id == employee_id)),
        )
        return bool(result.scalar())

    async def save(self, employee: Employee) -> Employee:
        """Insert or update the row, then reload server-side values."""
        email = employee.email  # rollback expires the instance
        self._db.add(employee)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(f"Unique constraint rejected save: {e.orig}")
            raise DuplicateEmailError(email) from e
        await self._db.refresh(employee)
        return employee

    async def delete_by_id(self, employee_id: EmployeeId) -> None:
        await self._db.execute(delete(Employee).where(Employee.id == employee_id))
        await self._db.commit()

    async def delete_all_by_id(self, employee_ids: Sequence[EmployeeId]) -> None:
        if not employee_ids:
            return
        result = await self._db.execute(
            delete(Employee).where(Employee.id.in_(list(employee_ids))),
        )
        await self._db.commit()
        logger.info(
            f"Batch delete removed {result.rowcount} of {len(employee_ids)} requested employees",
        )
