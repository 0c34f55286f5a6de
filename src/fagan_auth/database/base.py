from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import StorageError
from .connection import SQLITE, DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Yield ``(conn, cur)`` with rows readable by column name.

    Commits on success, rolls back on any error, always closes. Driver errors
    are re-raised as ``StorageError``; domain errors raised inside the block
    pass through untouched.
    """
    driver_errors = conn_factory.driver_errors
    try:
        conn = conn_factory.connect()
    except driver_errors as e:
        raise StorageError(f"Cannot open database ({conn_factory.config.describe()}): {e}") from e

    try:
        if conn_factory.config.driver == SQLITE:
            cur = conn.cursor()
        else:
            cur = conn.cursor(dictionary=True)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except driver_errors as e:
        conn.rollback()
        raise StorageError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]
