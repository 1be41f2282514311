"""Password Hasher - bcrypt implementation of the PasswordHasher contract.

Invariants:
    - hash() never returns the plaintext; every call uses a fresh salt
    - Input is UTF-8 encoded and truncated to bcrypt's 72-byte limit
    - verify() returns False (never raises) for a malformed stored hash
"""

from functools import lru_cache

import bcrypt

from employee_registry.config import get_settings

BCRYPT_MAX_BYTES = 72


def _prepare_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """One-way password hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prepare_password(plain_password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                _prepare_password(plain_password),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            return False


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)
