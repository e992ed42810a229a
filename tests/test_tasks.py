from datetime import date

from wedding_planner.modules.tasks.service import TaskService

TODAY = date(2025, 6, 15)


def test_overdue_tasks_are_incomplete_and_due_before_today(supabase):
    supabase.respond("tasks", [{"id": "t1", "event_id": "e1", "title": "Book venue", "due_date": "2025-06-01"}])

    tasks = TaskService(supabase).get_overdue_tasks("user-1", today=TODAY)

    assert [t.id for t in tasks] == ["t1"]
    query = supabase.queries_for("tasks")[0]
    assert query.called("lt")[0][1] == ("due_date", "2025-06-15")
    assert [call[1] for call in query.called("eq")] == [("events.created_by", "user-1"), ("completed", False)]


def test_upcoming_tasks_window_is_a_week_inclusive(supabase):
    TaskService(supabase).get_upcoming_tasks("user-1", "e1", today=TODAY)

    query = supabase.queries_for("tasks")[0]
    assert query.called("gte")[0][1] == ("due_date", "2025-06-15")
    assert query.called("lte")[0][1] == ("due_date", "2025-06-22")
    assert ("event_id", "e1") in [call[1] for call in query.called("eq")]
