from __future__ import annotations

import dataclasses
from typing import Iterable, Optional

import pytest

from fagan_auth.core.constants import DEFAULT_RESERVED_ADMINS
from fagan_auth.core.enums import Role
from fagan_auth.core.exceptions import DuplicateUsernameError, NotFoundError
from fagan_auth.database.bootstrap import init_database
from fagan_auth.database.connection import DBConfig, DatabaseConnection
from fagan_auth.users.model import PublicUser, User
from fagan_auth.users.passwords import PasswordHasher
from fagan_auth.users.service import AuthService
from fagan_auth.users.sqlite_user_repository import SQLiteUserRepository

FAST_HASH_METHOD = "pbkdf2:sha256:1000"
FIXED_NOW = "2025-01-01T08:00:00+07:00"


class InMemoryUsers:
    """UserRepository fake keyed by id."""

    def __init__(self):
        self.by_id: dict[str, User] = {}

    def create_schema(self) -> None:
        pass

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.by_id.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.by_id.values() if u.username == username), None)

    def insert(self, user: User) -> None:
        if self.get_by_username(user.username):
            raise DuplicateUsernameError(user.username)
        self.by_id[user.id] = user

    def update_password_hash(self, user_id: str, *, password_hash: str, updated_at: str) -> None:
        user = self.by_id.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        self.by_id[user_id] = dataclasses.replace(user, password_hash=password_hash, updated_at=updated_at)

    def delete_secretary(self, user_id: str) -> bool:
        user = self.by_id.get(user_id)
        if not user or user.role != Role.SECRETARY:
            return False
        del self.by_id[user_id]
        return True

    def list_public(self) -> list[PublicUser]:
        users = sorted(self.by_id.values(), key=lambda u: (u.role.value, u.username))
        return [u.public_view() for u in users]

    def count_usernames(self, usernames: Iterable[str]) -> int:
        names = set(usernames)
        return sum(1 for u in self.by_id.values() if u.username in names)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(FAST_HASH_METHOD)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_users(hasher) -> InMemoryUsers:
    users = InMemoryUsers()
    init_database(users, hasher, DEFAULT_RESERVED_ADMINS, clock=lambda: FIXED_NOW)
    return users


@pytest.fixture
def memory_service(memory_users, hasher, fixed_clock) -> AuthService:
    return AuthService(memory_users, hasher, clock=fixed_clock)


@pytest.fixture
def sqlite_repo(tmp_path) -> SQLiteUserRepository:
    conn = DatabaseConnection(DBConfig(driver="sqlite", path=str(tmp_path / "users.db")))
    return SQLiteUserRepository(conn)


@pytest.fixture
def seeded_repo(sqlite_repo, hasher) -> SQLiteUserRepository:
    init_database(sqlite_repo, hasher, DEFAULT_RESERVED_ADMINS)
    return sqlite_repo


@pytest.fixture
def sqlite_service(seeded_repo, hasher) -> AuthService:
    return AuthService(seeded_repo, hasher)
