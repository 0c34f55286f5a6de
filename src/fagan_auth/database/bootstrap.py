from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, List, Sequence, Tuple

from ..common.datetime_utils import now_timestamp
from ..core.constants import DEFAULT_RESERVED_ADMINS
from ..core.enums import Role
from ..core.exceptions import DuplicateUsernameError
from ..users.model import User
from ..users.passwords import PasswordHasher
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)

ReservedAdmin = Tuple[str, str]


def parse_reserved_admins(pairs: Iterable[Sequence[str]]) -> List[ReservedAdmin]:
    admins = [(str(p[0]), str(p[1])) for p in pairs]
    if len(admins) != 2:
        raise ValueError(f"Exactly two reserved admin accounts are required, got {len(admins)}")
    if admins[0][0] == admins[1][0]:
        raise ValueError("Reserved admin usernames must differ")
    return admins


def ensure_reserved_admins(
    users: UserRepository,
    hasher: PasswordHasher,
    reserved_admins: Iterable[Sequence[str]] = DEFAULT_RESERVED_ADMINS,
    *,
    clock: Callable[[], str] = now_timestamp,
) -> List[str]:
    """Create whichever reserved admin accounts are missing.

    Returns the usernames created (empty when both already exist).
    """
    admins = parse_reserved_admins(reserved_admins)
    if users.count_usernames(name for name, _ in admins) >= len(admins):
        return []

    now = clock()
    created: List[str] = []
    for username, password in admins:
        if users.get_by_username(username):
            continue
        try:
            users.insert(
                User(
                    id=str(uuid.uuid4()),
                    username=username,
                    password_hash=hasher.hash(password),
                    role=Role.ADMIN,
                    created_at=now,
                    updated_at=now,
                )
            )
        except DuplicateUsernameError:
            # Seeded concurrently by another process.
            continue
        created.append(username)
        logger.info("Seeded reserved admin account %r", username)
    return created


def init_database(
    users: UserRepository,
    hasher: PasswordHasher,
    reserved_admins: Iterable[Sequence[str]] = DEFAULT_RESERVED_ADMINS,
    *,
    clock: Callable[[], str] = now_timestamp,
) -> List[str]:
    """Create the users table if absent and seed the reserved admins.

    Safe on every start. Errors propagate; callers treat them as fatal.
    """
    users.create_schema()
    return ensure_reserved_admins(users, hasher, reserved_admins, clock=clock)
