from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import PublicUser, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def create_schema(self) -> None:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def insert(self, user: User) -> None:
        """Raises DuplicateUsernameError when the username is taken."""
        raise NotImplementedError

    def update_password_hash(self, user_id: str, *, password_hash: str, updated_at: str) -> None:
        """Raises NotFoundError when no row matches ``user_id``."""
        raise NotImplementedError

    def delete_secretary(self, user_id: str) -> bool:
        """Delete only if the row is still a secretary. Returns whether a row went away."""
        raise NotImplementedError

    def list_public(self) -> Sequence[PublicUser]:
        raise NotImplementedError

    def count_usernames(self, usernames: Iterable[str]) -> int:
        raise NotImplementedError
