from __future__ import annotations

import sqlite3

from .sql_user_repository import SQLUserRepository

# Extended result codes (sqlite3 module constants on 3.11+).
_UNIQUE_CODES = {
    getattr(sqlite3, "SQLITE_CONSTRAINT_UNIQUE", 2067),
    getattr(sqlite3, "SQLITE_CONSTRAINT_PRIMARYKEY", 1555),
}


class SQLiteUserRepository(SQLUserRepository):
    placeholder = "?"
    schema_sql = """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            role TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """
    integrity_errors = (sqlite3.IntegrityError,)

    @staticmethod
    def is_duplicate_username(error: BaseException) -> bool:
        return getattr(error, "sqlite_errorcode", None) in _UNIQUE_CODES
