from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core.constants import DEFAULT_PASSWORD_HASH_METHOD
from .database.connection import MYSQL, DBConfig, DatabaseConnection
from .users.mysql_user_repository import MySQLUserRepository
from .users.passwords import PasswordHasher
from .users.service import AuthService
from .users.sql_user_repository import SQLUserRepository
from .users.sqlite_user_repository import SQLiteUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: SQLUserRepository
    hasher: PasswordHasher

    auth_service: AuthService


def build_users_repo(conn: DatabaseConnection) -> SQLUserRepository:
    if conn.config.driver == MYSQL:
        return MySQLUserRepository(conn)
    return SQLiteUserRepository(conn)


def build_container(
    *,
    db_config: Mapping[str, Any],
    password_hash_method: str = DEFAULT_PASSWORD_HASH_METHOD,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    users_repo = build_users_repo(conn)
    hasher = PasswordHasher(password_hash_method)

    auth_service = AuthService(users_repo, hasher)

    return Container(
        conn=conn,
        users_repo=users_repo,
        hasher=hasher,
        auth_service=auth_service,
    )
