"""Boundary Protocols - contracts between the service and the store/hasher.

Invariants:
    - Service code depends only on these Protocols, never on SQLAlchemy
    - All store operations are async because implementations do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol, Sequence

from employee_registry.core.domain_types import EmployeeId
from employee_registry.models.employee import Employee


class EmployeeRepository(Protocol):
    """Contract for employee persistence - implemented by infrastructure."""
    async def get_by_id(self, employee_id: EmployeeId) -> Employee | None: ...
    async def get_all(self) -> Sequence[Employee]: ...
    async def get_by_email(self, email: str) -> Employee | None: ...
    async def exists_by_id(self, employee_id: EmployeeId) -> bool: ...
    async def save(self, employee: Employee) -> Employee: ...
    async def delete_by_id(self, employee_id: EmployeeId) -> None: ...
    async def delete_all_by_id(self, employee_ids: Sequence[EmployeeId]) -> None: ...


class PasswordHasher(Protocol):
    """Contract for one-way password hashing."""
    def hash(self, plain_password: str) -> str: ...
    def verify(self, plain_password: str, hashed_password: str) -> bool: ...
