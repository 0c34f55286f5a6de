from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import Role


@dataclass(frozen=True)
class PublicUser:
    """The part of a user that may leave the service: no password hash."""

    id: str
    username: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "role": self.role.value}


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code). ``password_hash`` is excluded
    from repr so it does not end up in logs or tracebacks.
    """

    id: str
    username: str
    password_hash: str = field(repr=False)
    role: Role
    created_at: str
    updated_at: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_secretary(self) -> bool:
        return self.role == Role.SECRETARY

    def public_view(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username, role=self.role)
