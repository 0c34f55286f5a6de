from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time, offset-aware.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().astimezone()


def now_timestamp() -> str:
    """RFC 3339 text for created_at/updated_at columns."""
    return now_local().isoformat()
