"""Employee ORM - the single persisted entity of the registry.

Invariants:
    - id is an integer primary key assigned by the store, never reassigned
    - email is unique across all rows (unique index)
    - password holds a bcrypt hash once the create path completes
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_registry.core.domain_types import DEFAULT_ROLE
from employee_registry.db.base import Base


class Employee(Base):
    """Employee row."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(50), nullable=False, default=DEFAULT_ROLE,
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} email={self.email!r}>"
