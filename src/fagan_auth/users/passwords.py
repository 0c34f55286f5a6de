"""Salted adaptive password hashing (werkzeug, with bcrypt read support)."""
from __future__ import annotations

import bcrypt
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import BCRYPT_HASH_PREFIXES, DEFAULT_PASSWORD_HASH_METHOD
from ..core.exceptions import HashingError


def is_bcrypt_hash(password_hash: str) -> bool:
    return password_hash.startswith(BCRYPT_HASH_PREFIXES)


class PasswordHasher:
    """Hash/verify with one fixed method string, e.g. ``scrypt:32768:8:1``.

    The method pins both algorithm and work factor; the salt is per hash.
    Databases written by the earlier desktop build hold bcrypt hashes
    (``$2b$10$...``); those are still verified, new hashes always use the
    werkzeug method.
    """

    def __init__(self, method: str = DEFAULT_PASSWORD_HASH_METHOD):
        self._method = method

    @property
    def method(self) -> str:
        return self._method

    def hash(self, password: str) -> str:
        try:
            return generate_password_hash(password, method=self._method)
        except ValueError as e:
            raise HashingError(f"Cannot hash password with method {self._method!r}: {e}") from e

    def verify(self, password: str, password_hash: str) -> bool:
        if is_bcrypt_hash(password_hash):
            return self._verify_bcrypt(password, password_hash)
        try:
            return check_password_hash(password_hash, password)
        except ValueError as e:
            # e.g. a stored hash whose method werkzeug does not know
            raise HashingError(f"Cannot verify password: {e}") from e

    @staticmethod
    def _verify_bcrypt(password: str, password_hash: str) -> bool:
        # bcrypt only looks at the first 72 bytes
        pw_bytes = password.encode("utf-8")[:72]
        try:
            return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
        except ValueError as e:
            raise HashingError(f"Cannot verify bcrypt password hash: {e}") from e
