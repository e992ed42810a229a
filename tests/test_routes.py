import pytest
from fastapi.testclient import TestClient

from wedding_planner.config import settings
from wedding_planner.core.dependencies import get_session
from wedding_planner.database.supabase_client import get_service_supabase, get_supabase
from wedding_planner.main import app

OWNED_EVENT = {"id": "e1", "created_by": "user-1", "is_public": False}


@pytest.fixture
def client(supabase, couple_session):
    app.dependency_overrides[get_supabase] = lambda: supabase
    app.dependency_overrides[get_service_supabase] = lambda: supabase
    app.dependency_overrides[get_session] = lambda: couple_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health():
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_ready_requires_supabase_configuration(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")

    assert TestClient(app).get("/ready").status_code == 503


def test_protected_route_requires_token(supabase):
    app.dependency_overrides[get_supabase] = lambda: supabase
    try:
        response = TestClient(app).get("/api/v1/events")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code in (401, 403)


def test_budget_summary_for_event_owner(client, supabase):
    supabase.respond("events", OWNED_EVENT)
    supabase.respond("budget_items", [
        {"category": "Venue", "budgeted": 1000, "spent": 950},
        {"category": "Catering", "budgeted": 1000, "spent": 250},
    ])

    response = client.get("/api/v1/budget/event/e1/summary")

    assert response.status_code == 200
    assert response.json() == {
        "totalBudgeted": 2000,
        "totalSpent": 1200,
        "remaining": 800,
        "percentageUsed": 60,
        "isOverBudget": False,
    }


def test_budget_of_someone_elses_event_is_forbidden(client, supabase):
    supabase.respond("events", {"id": "e2", "created_by": "user-2", "is_public": True})

    response = client.get("/api/v1/budget/event/e2/summary")

    assert response.status_code == 403


def test_missing_event_is_not_found(client, supabase):
    supabase.respond("events", None)

    assert client.get("/api/v1/guests/event/nope/stats").status_code == 404


def test_anonymous_favorite_status(supabase):
    app.dependency_overrides[get_supabase] = lambda: supabase
    try:
        response = TestClient(app).get("/api/v1/favorites/v1")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"vendor_id": "v1", "is_favorite": False}


def test_auto_assign_seats_attending_guests(client, supabase):
    supabase.respond("events", OWNED_EVENT)
    supabase.respond("seating_plans", {
        "id": "p1", "event_id": "e1", "name": "Reception", "layout": "round",
        "tables": [{"number": 1, "seats": 2}, {"number": 2, "seats": 2}],
    })
    supabase.respond("guests", [
        {"id": "g1", "event_id": "e1", "name": "Ana", "rsvp_status": "attending"},
        {"id": "g2", "event_id": "e1", "name": "Ben", "rsvp_status": "declined"},
        {"id": "g3", "event_id": "e1", "name": "Cleo", "rsvp_status": "attending",
         "plus_one": True, "plus_one_name": "Dev"},
        {"id": "g4", "event_id": "e1", "name": "Eli", "rsvp_status": "attending", "table_number": 2},
    ])

    response = client.post("/api/v1/seating/p1/auto-assign")

    assert response.status_code == 200
    body = response.json()
    assert body["assignments"] == [
        {"guest_id": "g1", "table_number": 1},
        {"guest_id": "g3", "table_number": 2},
    ]
    assert body["assigned"] == 2
    assert body["unassigned"] == 0


def test_confirming_a_booking_records_the_expense(client, supabase):
    pending = {
        "id": "bk1", "event_id": "e1", "vendor_id": "v1", "couple_id": "user-1",
        "service": "Wedding photography", "date": "2025-09-20", "amount": 2400, "status": "pending",
    }
    supabase.respond("bookings", pending)
    supabase.respond("bookings", pending)
    supabase.respond("bookings", [{**pending, "status": "confirmed"}])
    supabase.respond("vendors", {"id": "v1", "name": "Lens & Light", "category": "photography"})
    supabase.respond("budget_items", [])
    supabase.respond("budget_items", [{
        "id": "b1", "event_id": "e1", "category": "photography",
        "budgeted": 2880, "spent": 2400, "remaining": 480, "vendors": ["Lens & Light"],
    }])

    response = client.put("/api/v1/bookings/bk1/status", json={"status": "confirmed"})

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    inserted = supabase.queries_for("budget_items", "insert")[0].called("insert")[0][1][0]
    assert inserted["category"] == "photography"
    assert inserted["spent"] == 2400
    assert inserted["vendors"] == ["Lens & Light"]


def test_invalid_booking_status_is_rejected(client):
    response = client.put("/api/v1/bookings/bk1/status", json={"status": "archived"})

    assert response.status_code == 422


def test_creating_a_task_refreshes_event_progress(client, supabase):
    supabase.respond("events", OWNED_EVENT)
    supabase.respond("tasks", [{"id": "t1", "event_id": "e1", "title": "Book venue", "completed": False}])
    supabase.respond("tasks", [{"completed": True}, {"completed": False}])

    response = client.post("/api/v1/tasks", json={"event_id": "e1", "title": "Book venue"})

    assert response.status_code == 201
    update = supabase.queries_for("events", "update")[0]
    assert update.called("update")[0][1][0] == {"progress": 50}
    assert update.called("eq")[0][1] == ("id", "e1")


def test_completing_a_task_refreshes_event_progress(client, supabase):
    supabase.respond("tasks", {"id": "t1", "event_id": "e1"})
    supabase.respond("tasks", [{"id": "t1", "event_id": "e1", "title": "Book venue", "completed": True}])
    supabase.respond("tasks", [{"completed": True}])
    supabase.respond("events", OWNED_EVENT)

    response = client.post("/api/v1/tasks/t1/complete")

    assert response.status_code == 200
    assert supabase.queries_for("events", "update")[0].called("update")[0][1][0] == {"progress": 100}


def test_csv_import_rejects_non_utf8_upload(client, supabase):
    supabase.respond("events", OWNED_EVENT)

    response = client.post(
        "/api/v1/guests/event/e1/import-csv",
        files={"file": ("guests.csv", b"name\n\xff\xfeBad\n", "text/csv")},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "CSV must be UTF-8 encoded"
    assert supabase.queries_for("guests") == []


def test_csv_import_with_extra_fields(client, supabase):
    supabase.respond("events", OWNED_EVENT)
    supabase.respond("guests", [{"id": "g1", "event_id": "e1", "name": "Ada", "email": "ada@example.com"}])

    response = client.post(
        "/api/v1/guests/event/e1/import-csv",
        files={"file": ("guests.csv", b"name,email\nAda,ada@example.com,extra\n", "text/csv")},
    )

    assert response.status_code == 201
    assert [g["name"] for g in response.json()] == ["Ada"]


def test_invited_guest_can_answer_their_own_rsvp(client, supabase):
    guest = {"id": "g1", "event_id": "e9", "name": "Someone", "email": "Someone@Example.com"}
    supabase.respond("guests", guest)
    supabase.respond("guests", [{**guest, "rsvp_status": "attending"}])

    response = client.put("/api/v1/guests/g1/rsvp", json={"status": "attending"})

    assert response.status_code == 200
    assert response.json()["rsvp_status"] == "attending"
    assert supabase.queries_for("events") == []


def test_conversation_requires_a_uuid(client, supabase):
    response = client.get("/api/v1/messages/conversations/x),id.not.is.null,and(id.is.null")

    assert response.status_code == 422
    assert supabase.queries_for("messages") == []
