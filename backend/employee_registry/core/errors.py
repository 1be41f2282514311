"""Error Hierarchy - typed exceptions for every deliberate failure of the registry.

Invariants:
    - Every domain error carries a code (str) and its own http_status
    - to_response() produces the REST envelope {"error": message}
    - kind tags the translator class; DatabaseError has none and is reported as unexpected

Design Decisions:
    - One subclass per failure kind; the status travels with the class,
      so a new kind cannot fall into another kind's status
"""

from employee_registry.core.domain_types import EmployeeId, ErrorKind


class EmployeeRegistryError(Exception):
    """Base exception for all deliberate (domain) failures."""

    kind = ErrorKind.DOMAIN

    def __init__(self, message: str, code: str, http_status: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmployeeNotFoundError(EmployeeRegistryError):
    """No employee row exists for the requested id."""
    def __init__(self, employee_id: EmployeeId):
        super().__init__(
            f"Employee not found with id: {employee_id}",
            "EMPLOYEE_NOT_FOUND", 404,
        )
        self.employee_id = employee_id


class DuplicateEmailError(EmployeeRegistryError):
    """Email already belongs to another employee."""
    def __init__(self, email: str):
        super().__init__(
            f"Employee already exists with email: {email}",
            "DUPLICATE_EMAIL", 409,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(Exception):
    """Database operation failed."""

    def __init__(self, message: str, operation: str):
        super().__init__(f"Database {operation} failed: {message}")
        self.message = message
        self.operation = operation
