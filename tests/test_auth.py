from unittest.mock import MagicMock

from wedding_planner.modules.auth.models import SIGNED_IN, SIGNED_OUT
from wedding_planner.modules.auth.schemas import LoginRequest
from wedding_planner.modules.auth.service import AuthService


def make_auth_client():
    supabase = MagicMock()
    user = MagicMock(id="user-1", email="jamie@example.com", user_metadata={"name": "Jamie"}, app_metadata={})
    supabase.auth.sign_in_with_password.return_value = MagicMock(
        user=user, session=MagicMock(access_token="access-token")
    )
    return supabase


def test_login_and_logout_notify_listeners():
    events = []
    unsubscribe = AuthService.on_auth_state_change(lambda event, user: events.append((event, user)))
    service = AuthService(make_auth_client())
    try:
        token = service.login(LoginRequest(email="jamie@example.com", password="secret"))
        service.logout(token.access_token, {"id": "user-1"})
    finally:
        unsubscribe()

    assert token.user_id == "user-1"
    assert [event for event, _ in events] == [SIGNED_IN, SIGNED_OUT]
    assert events[0][1]["id"] == "user-1"
    assert events[0][1]["user_metadata"] == {"name": "Jamie"}
    assert events[1][1] == {"id": "user-1"}


def test_unsubscribed_listener_is_not_called():
    events = []
    unsubscribe = AuthService.on_auth_state_change(lambda event, user: events.append(event))
    unsubscribe()

    AuthService(make_auth_client()).login(LoginRequest(email="jamie@example.com", password="secret"))

    assert events == []
    # A second unsubscribe is harmless
    unsubscribe()


def test_failing_listener_does_not_break_login():
    def broken(event, user):
        raise RuntimeError("listener down")

    unsubscribe = AuthService.on_auth_state_change(broken)
    try:
        token = AuthService(make_auth_client()).login(LoginRequest(email="jamie@example.com", password="secret"))
    finally:
        unsubscribe()

    assert token.access_token == "access-token"


def test_failed_sign_out_emits_nothing():
    events = []
    supabase = make_auth_client()
    supabase.auth.sign_out.side_effect = Exception("network down")
    unsubscribe = AuthService.on_auth_state_change(lambda event, user: events.append(event))
    try:
        assert AuthService(supabase).logout("access-token") is False
    finally:
        unsubscribe()

    assert events == []
