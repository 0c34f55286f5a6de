from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_timestamp
from ..core import constants as msg
from ..core.enums import ErrorKind, Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateUsernameError,
    NotFoundError,
)
from .model import PublicUser, User
from .passwords import PasswordHasher
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResponse:
    """Uniform result of every account operation.

    ``error`` tags a failure for the boundary layer; it is not part of the
    serialized shape.
    """

    success: bool
    message: str
    user: Optional[PublicUser] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str, user: Optional[PublicUser] = None) -> "AuthResponse":
        return cls(success=True, message=message, user=user)

    @classmethod
    def failure(cls, error: DomainError) -> "AuthResponse":
        return cls(success=False, message=str(error), user=None, error=error.kind)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "user": self.user.to_dict() if self.user else None,
        }


class AuthService:
    """Use cases: login and admin-gated secretary account management.

    Business outcomes (bad credentials, unknown actor, wrong role, duplicate
    username) come back as ``AuthResponse(success=False)``. Storage and
    hashing failures propagate as ``InfrastructureError``.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: Optional[PasswordHasher] = None,
        *,
        clock: Callable[[], str] = now_timestamp,
    ):
        self._users = users
        self._hasher = hasher or PasswordHasher()
        self._clock = clock

    def _require_admin(self, username: str, *, not_found: str, forbidden: str) -> User:
        actor = self._users.get_by_username(username)
        if not actor:
            raise NotFoundError(not_found)
        if not actor.is_admin:
            logger.warning("Rejected account operation by non-admin %r", username)
            raise AuthorizationError(forbidden)
        return actor

    def login(self, username: str, password: str) -> AuthResponse:
        user = self._users.get_by_username(username)
        # Same message for unknown user and wrong password.
        if not user or not self._hasher.verify(password, user.password_hash):
            return AuthResponse.failure(AuthenticationError(msg.MSG_INVALID_CREDENTIALS))

        return AuthResponse.ok(msg.MSG_LOGIN_OK, user.public_view())

    def create_secretary(self, username: str, password: str, creator_username: str) -> AuthResponse:
        try:
            self._require_admin(
                creator_username,
                not_found=msg.MSG_CREATOR_NOT_FOUND,
                forbidden=msg.MSG_ONLY_ADMIN_CREATE,
            )
        except DomainError as e:
            return AuthResponse.failure(e)

        now = self._clock()
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=self._hasher.hash(password),
            role=Role.SECRETARY,
            created_at=now,
            updated_at=now,
        )
        try:
            self._users.insert(user)
        except DuplicateUsernameError:
            return AuthResponse.failure(DuplicateUsernameError(msg.MSG_USERNAME_EXISTS))

        logger.info("Secretary %r created by %r", username, creator_username)
        return AuthResponse.ok(msg.MSG_SECRETARY_CREATED, user.public_view())

    def list_users(self) -> Sequence[PublicUser]:
        return list(self._users.list_public())

    def change_password(self, user_id: str, old_password: str, new_password: str) -> AuthResponse:
        """Change a user's password after checking the current one.

        Raises ``NotFoundError`` when ``user_id`` does not exist; unlike the
        other operations this is not folded into a failure response.
        """
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError(msg.MSG_USER_NOT_FOUND)

        if not self._hasher.verify(old_password, user.password_hash):
            return AuthResponse.failure(AuthenticationError(msg.MSG_WRONG_CURRENT_PASSWORD))

        self._users.update_password_hash(
            user.id,
            password_hash=self._hasher.hash(new_password),
            updated_at=self._clock(),
        )
        logger.info("Password changed for user %s", user.id)
        return AuthResponse.ok(msg.MSG_PASSWORD_CHANGED)

    def deactivate_secretary(self, user_id: str, admin_username: str) -> AuthResponse:
        try:
            self._require_admin(
                admin_username,
                not_found=msg.MSG_ADMIN_NOT_FOUND,
                forbidden=msg.MSG_ONLY_ADMIN_DEACTIVATE,
            )

            target = self._users.get_by_id(user_id)
            if not target:
                raise NotFoundError(msg.MSG_USER_NOT_FOUND)
            if not target.is_secretary:
                raise AuthorizationError(msg.MSG_ONLY_SECRETARY_DEACTIVATE)
        except DomainError as e:
            return AuthResponse.failure(e)

        # Guarded on role too, in case the row changed since the check above.
        if not self._users.delete_secretary(target.id):
            logger.warning("Guarded delete removed no row for user %s", target.id)
        else:
            logger.info("Secretary %r deactivated by %r", target.username, admin_username)
        return AuthResponse.ok(msg.MSG_SECRETARY_DEACTIVATED)
