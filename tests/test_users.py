from unittest.mock import MagicMock

from wedding_planner.core.session import SessionContext
from wedding_planner.modules.users.service import UserService

AUTH_USER = {
    "id": "user-1",
    "email": "jamie@example.com",
    "user_metadata": {"name": "Jamie", "role": "couple"},
}

PROFILE_ROW = {
    "id": "user-1",
    "name": "Jamie",
    "email": "jamie@example.com",
    "role": "couple",
    "is_approved": False,
    "privacy_accepted": True,
}


def test_create_user_profile_returns_existing_row(supabase):
    supabase.respond("users", PROFILE_ROW)

    service = UserService(supabase)
    first = service.create_user_profile("user-1", "Jamie", "jamie@example.com", "couple")
    second = service.create_user_profile("user-1", "Someone Else", "jamie@example.com", "vendor")

    assert first == second
    assert second.role == "couple"
    assert supabase.queries_for("users", "insert") == []


def test_create_user_profile_inserts_when_missing(supabase):
    supabase.respond("users", None)
    supabase.respond("users", [PROFILE_ROW])

    profile = UserService(supabase).create_user_profile("user-1", "Jamie", "jamie@example.com", "couple")

    inserted = supabase.queries_for("users", "insert")[0].called("insert")[0][1][0]
    assert inserted["is_approved"] is False
    assert inserted["privacy_accepted"] is True
    assert profile.name == "Jamie"


def test_ensure_user_profile_falls_back_when_database_fails():
    supabase = MagicMock()
    supabase.table.side_effect = Exception("database unavailable")

    profile = UserService(supabase).ensure_user_profile(AUTH_USER)

    assert profile.id == "user-1"
    assert profile.name == "Jamie"
    assert profile.role == "couple"
    assert profile.is_approved is False


def test_ensure_user_profile_without_user():
    assert UserService(MagicMock()).ensure_user_profile(None) is None


def test_fallback_profile_never_grants_admin():
    supabase = MagicMock()
    supabase.table.side_effect = Exception("database unavailable")
    user = {**AUTH_USER, "user_metadata": {"role": "admin"}}

    session = SessionContext(user, "token", UserService(supabase))

    assert session.role == "admin"
    assert session.is_admin is False
    assert session.profile.name == "jamie"


def test_create_user_profile_twice_inserts_once(supabase):
    supabase.respond("users", None)
    supabase.respond("users", [PROFILE_ROW])
    supabase.respond("users", PROFILE_ROW)

    service = UserService(supabase)
    first = service.create_user_profile("user-1", "Jamie", "jamie@example.com", "couple")
    second = service.create_user_profile("user-1", "Jamie", "jamie@example.com", "couple")

    assert first == second
    assert len(supabase.queries_for("users", "insert")) == 1
