"""Employee Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - firstName/lastName: required, stripped, non-blank, at most 100 chars
    - email: syntactically valid (EmailStr)
    - password: required on create, at least Settings.password_min_length chars
    - EmployeeUpdate has no password field: a password sent on update is dropped
    - EmployeeResponse exposes the stored hash, never a plaintext password

Design Decisions:
    - Validators raise ValueError with a human message; the error translator
      surfaces that message verbatim under the field's wire name
"""

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator,
)
from pydantic.alias_generators import to_camel

from employee_registry.config import get_settings
from employee_registry.core.domain_types import DEFAULT_ROLE

_FIELD_LABELS = {"first_name": "First name", "last_name": "Last name"}


class CamelModel(BaseModel):
    """Base schema: camelCase aliases on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeFields(CamelModel):
    """Fields shared by create and update payloads."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: EmailStr
    role: str = Field(DEFAULT_ROLE, max_length=50)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str, info: ValidationInfo) -> str:
        v = v.strip()
        if not v:
            raise ValueError(f"{_FIELD_LABELS[info.field_name]} is required")
        return v


class EmployeeCreate(EmployeeFields):
    """Registration payload - the only place a plaintext password enters."""
    password: str

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        min_length = get_settings().password_min_length
        if len(v) < min_length:
            raise ValueError(
                f"Password must be at least {min_length} characters long",
            )
        return v


class EmployeeUpdate(EmployeeFields):
    """Profile update payload - password changes are not part of this path."""


class EmployeeResponse(CamelModel):
    """Employee as returned by the API."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    email: str
    password: str
    role: str
