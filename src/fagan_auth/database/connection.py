from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any, Mapping

import mysql.connector
from mysql.connector.constants import ClientFlag

from ..core.constants import DEFAULT_SQLITE_PATH

SQLITE = "sqlite"
MYSQL = "mysql"


@dataclass(frozen=True)
class DBConfig:
    driver: str = SQLITE
    path: str = DEFAULT_SQLITE_PATH
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "fagan_inventory"

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        driver = str(db_config.get("driver", SQLITE)).lower()
        if driver not in (SQLITE, MYSQL):
            raise ValueError(f"Unsupported database driver: {driver!r}")
        return cls(
            driver=driver,
            path=str(db_config.get("path", DEFAULT_SQLITE_PATH)),
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "fagan_inventory")),
        )

    def describe(self) -> str:
        if self.driver == SQLITE:
            return f"sqlite:{self.path}"
        return f"mysql:{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation; the factory itself is
    passed explicitly to repositories (no process-wide instance).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def driver_errors(self) -> tuple[type[BaseException], ...]:
        if self._config.driver == SQLITE:
            return (sqlite3.Error,)
        return (mysql.connector.Error,)

    def connect(self):
        if self._config.driver == SQLITE:
            conn = sqlite3.connect(self._config.path)
            conn.row_factory = sqlite3.Row
            return conn
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            # rowcount reports matched rows, not only changed ones
            client_flags=[ClientFlag.FOUND_ROWS],
            use_pure=True,
        )
