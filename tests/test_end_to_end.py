"""Full account lifecycle against a real sqlite store."""
from fagan_auth.core.enums import Role

ADMIN = "fagan@admin_1"


def test_secretary_lifecycle(sqlite_service, seeded_repo):
    created = sqlite_service.create_secretary("alice", "pw1", ADMIN)
    assert created.success is True
    assert created.user.role == Role.SECRETARY

    login = sqlite_service.login("alice", "pw1")
    assert login.success is True
    assert login.user.role == Role.SECRETARY
    alice_id = login.user.id

    assert sqlite_service.change_password(alice_id, "pw1", "pw2").success is True
    assert sqlite_service.login("alice", "pw1").success is False

    assert sqlite_service.deactivate_secretary(alice_id, ADMIN).success is True
    gone = sqlite_service.login("alice", "pw2")
    assert gone.success is False
    assert gone.message == "Invalid credentials"
    assert seeded_repo.get_by_id(alice_id) is None


def test_non_admin_never_inserts(sqlite_service):
    sqlite_service.create_secretary("alice", "pw1", ADMIN)

    by_secretary = sqlite_service.create_secretary("bob", "pw", "alice")
    by_ghost = sqlite_service.create_secretary("carol", "pw", "ghost")

    assert not by_secretary.success
    assert not by_ghost.success
    assert [u.username for u in sqlite_service.list_users()] == ["fagan@admin_1", "fagan@admin_2", "alice"]


def test_admin_cannot_be_deactivated(sqlite_service, seeded_repo):
    admin2 = seeded_repo.get_by_username("fagan@admin_2")

    res = sqlite_service.deactivate_secretary(admin2.id, ADMIN)

    assert res.success is False
    assert seeded_repo.get_by_id(admin2.id) is not None
