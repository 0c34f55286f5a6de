from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization: admins manage secretaries."""

    ADMIN = "admin"
    SECRETARY = "secretary"


class ErrorKind(str, Enum):
    """Tag used by the boundary layer to map failures uniformly."""

    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    INFRASTRUCTURE = "infrastructure"
