"""Stores written by the earlier desktop build keep working."""
from __future__ import annotations

import sqlite3

import bcrypt
import pytest

from fagan_auth.database.bootstrap import init_database
from fagan_auth.database.connection import DBConfig, DatabaseConnection
from fagan_auth.users.passwords import is_bcrypt_hash
from fagan_auth.users.service import AuthService
from fagan_auth.users.sqlite_user_repository import SQLiteUserRepository

ADMIN = "fagan@admin_1"


def _bcrypt(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


@pytest.fixture
def legacy_repo(tmp_path) -> SQLiteUserRepository:
    path = tmp_path / "fagan_inventory.db"
    conn = sqlite3.connect(path)
    conn.execute(
        """
        CREATE TABLE users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            role TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
    )
    now = "2024-05-01T10:00:00+07:00"
    conn.executemany(
        "INSERT INTO users VALUES (?,?,?,?,?,?)",
        [
            ("a1", "fagan@admin_1", _bcrypt("fagan_glass"), "admin", now, now),
            ("a2", "fagan@admin_2", _bcrypt("fagan_aluminum"), "admin", now, now),
            ("s1", "maria", _bcrypt("pw-maria"), "secretary", now, now),
        ],
    )
    conn.commit()
    conn.close()
    return SQLiteUserRepository(DatabaseConnection(DBConfig(driver="sqlite", path=str(path))))


@pytest.fixture
def legacy_service(legacy_repo, hasher) -> AuthService:
    assert init_database(legacy_repo, hasher) == []
    return AuthService(legacy_repo, hasher)


def test_reserved_admins_log_in_against_bcrypt_hashes(legacy_service):
    first = legacy_service.login(ADMIN, "fagan_glass")
    second = legacy_service.login("fagan@admin_2", "fagan_aluminum")

    assert first.success is True
    assert first.user.id == "a1"
    assert second.success is True


def test_wrong_password_on_bcrypt_hash_is_a_normal_failure(legacy_service):
    res = legacy_service.login(ADMIN, "fagan_aluminum")

    assert res.to_dict() == {"success": False, "message": "Invalid credentials", "user": None}


def test_login_leaves_legacy_hash_untouched(legacy_service, legacy_repo):
    before = legacy_repo.get_by_id("a1").password_hash

    legacy_service.login(ADMIN, "fagan_glass")

    assert legacy_repo.get_by_id("a1").password_hash == before


def test_legacy_secretary_changes_password_to_current_method(legacy_service, legacy_repo):
    res = legacy_service.change_password("s1", "pw-maria", "pw-new")

    assert res.success is True
    assert not is_bcrypt_hash(legacy_repo.get_by_id("s1").password_hash)
    assert legacy_service.login("maria", "pw-new").success is True
    assert legacy_service.login("maria", "pw-maria").success is False


def test_legacy_admin_manages_secretaries(legacy_service):
    created = legacy_service.create_secretary("alice", "pw1", ADMIN)
    removed = legacy_service.deactivate_secretary("s1", ADMIN)

    assert created.success is True
    assert removed.success is True
    assert [u.username for u in legacy_service.list_users()] == ["fagan@admin_1", "fagan@admin_2", "alice"]
