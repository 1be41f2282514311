"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps the store-assigned integer key, within MIN_EMPLOYEE_ID..MAX_EMPLOYEE_ID
    - Every failure the API can report belongs to exactly one ErrorKind
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)

# signed 64-bit range of the id column
MIN_EMPLOYEE_ID = -(2 ** 63)
MAX_EMPLOYEE_ID = 2 ** 63 - 1


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_ROLE = "USER"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Failure classes of the error translator, most specific first."""
    VALIDATION = "validation"
    MALFORMED_PAYLOAD = "malformed_payload"
    DOMAIN = "domain"
    UNEXPECTED = "unexpected"
