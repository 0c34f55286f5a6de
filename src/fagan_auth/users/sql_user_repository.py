from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from ..core.constants import MSG_USER_NOT_FOUND
from ..core.enums import Role
from ..core.exceptions import DuplicateUsernameError, NotFoundError, StorageError
from ..database.connection import DatabaseConnection
from ..database.base import db_cursor, fetchall, fetchone
from .model import PublicUser, User
from .repository import UserRepository


def _role_from_row(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError as e:
        raise StorageError(f"Unknown role stored in users table: {value!r}") from e


def _user_from_row(row: Dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        role=_role_from_row(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SQLUserRepository(UserRepository):
    """Shared SQL for the users table.

    Subclasses provide the driver's parameter placeholder, the DDL, and the
    check that decides whether an integrity error is a username conflict.
    """

    placeholder = "?"
    schema_sql = ""
    integrity_errors: tuple[type[BaseException], ...] = ()

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _sql(self, statement: str) -> str:
        return statement.replace("?", self.placeholder)

    @staticmethod
    def is_duplicate_username(error: BaseException) -> bool:
        raise NotImplementedError

    def create_schema(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(self.schema_sql)

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                self._sql(
                    """
                    SELECT id, username, password_hash, role, created_at, updated_at
                    FROM users
                    WHERE id=?
                    """
                ),
                (user_id,),
            )
            row = fetchone(cur)
            return _user_from_row(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                self._sql(
                    """
                    SELECT id, username, password_hash, role, created_at, updated_at
                    FROM users
                    WHERE username=?
                    """
                ),
                (username,),
            )
            row = fetchone(cur)
            return _user_from_row(row) if row else None

    def insert(self, user: User) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    self._sql(
                        """
                        INSERT INTO users(id, username, password_hash, role, created_at, updated_at)
                        VALUES(?,?,?,?,?,?)
                        """
                    ),
                    (user.id, user.username, user.password_hash, user.role.value, user.created_at, user.updated_at),
                )
            except self.integrity_errors as e:
                if self.is_duplicate_username(e):
                    raise DuplicateUsernameError(f"Username already exists: {user.username}") from e
                raise

    def update_password_hash(self, user_id: str, *, password_hash: str, updated_at: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                self._sql("UPDATE users SET password_hash=?, updated_at=? WHERE id=?"),
                (password_hash, updated_at, user_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError(MSG_USER_NOT_FOUND)

    def delete_secretary(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                self._sql("DELETE FROM users WHERE id=? AND role=?"),
                (user_id, Role.SECRETARY.value),
            )
            return cur.rowcount > 0

    def list_public(self) -> Sequence[PublicUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, role FROM users ORDER BY role, username")
            rows = fetchall(cur)
            return [
                PublicUser(id=str(r["id"]), username=r["username"], role=_role_from_row(r["role"]))
                for r in rows
            ]

    def count_usernames(self, usernames: Iterable[str]) -> int:
        names = list(usernames)
        if not names:
            return 0
        marks = ",".join("?" for _ in names)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(self._sql(f"SELECT COUNT(*) AS n FROM users WHERE username IN ({marks})"), tuple(names))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
