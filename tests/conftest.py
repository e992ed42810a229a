from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from wedding_planner.core.session import SessionContext
from wedding_planner.modules.users.schemas import UserProfile


class FakeResponse:
    def __init__(self, data: Any = None, count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable stand-in for a postgrest query; records every call and returns a canned response"""

    def __init__(self, table: str, response: FakeResponse):
        self.table_name = table
        self.response = response
        self.calls: List[tuple] = []

    def __getattr__(self, name: str):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def execute(self) -> FakeResponse:
        return self.response

    def called(self, name: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == name]


class FakeSupabase:
    """
    Minimal Supabase client double.

    Responses are queued per table and consumed in order; the last one is
    reused once the queue is down to a single entry.
    """

    def __init__(self):
        self._responses: Dict[str, List[FakeResponse]] = {}
        self.queries: List[FakeQuery] = []

    def respond(self, table: str, data: Any = None, count: Optional[int] = None) -> "FakeSupabase":
        self._responses.setdefault(table, []).append(FakeResponse(data, count))
        return self

    def table(self, name: str) -> FakeQuery:
        queue = self._responses.get(name) or [FakeResponse([])]
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        query = FakeQuery(name, response)
        self.queries.append(query)
        return query

    def queries_for(self, table: str, operation: Optional[str] = None) -> List[FakeQuery]:
        found = [q for q in self.queries if q.table_name == table]
        if operation:
            found = [q for q in found if q.called(operation)]
        return found


@pytest.fixture
def supabase() -> FakeSupabase:
    return FakeSupabase()


def make_session(user_id: str = "user-1", role: str = "couple", is_approved: bool = True,
                 email: str = "someone@example.com") -> SessionContext:
    user_service = MagicMock()
    user_service.ensure_user_profile.return_value = UserProfile(
        id=user_id, name="Someone", email=email, role=role, is_approved=is_approved
    )
    user = {"id": user_id, "email": email, "user_metadata": {}}
    return SessionContext(user, "token", user_service)


@pytest.fixture
def couple_session() -> SessionContext:
    return make_session()


@pytest.fixture
def session_factory():
    return make_session
