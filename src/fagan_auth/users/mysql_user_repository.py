from __future__ import annotations

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from .sql_user_repository import SQLUserRepository


class MySQLUserRepository(SQLUserRepository):
    placeholder = "%s"
    schema_sql = """
        CREATE TABLE IF NOT EXISTS users (
            id VARCHAR(36) PRIMARY KEY,
            username VARCHAR(255) NOT NULL UNIQUE,
            password_hash VARCHAR(255) NOT NULL,
            role VARCHAR(32) NOT NULL,
            created_at VARCHAR(64) NOT NULL,
            updated_at VARCHAR(64) NOT NULL
        ) CHARACTER SET utf8mb4 COLLATE utf8mb4_bin
    """
    integrity_errors = (IntegrityError,)

    @staticmethod
    def is_duplicate_username(error: BaseException) -> bool:
        return getattr(error, "errno", None) == errorcode.ER_DUP_ENTRY
