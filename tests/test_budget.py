from wedding_planner.modules.budget.models import BOOKING_BUDGET_HEADROOM
from wedding_planner.modules.budget.service import BudgetService, compute_budget_alerts, summarize_budget


def test_summarize_budget():
    summary = summarize_budget([
        {"budgeted": 1000, "spent": 400},
        {"budgeted": 500, "spent": 500},
    ])

    assert summary.totalBudgeted == 1500
    assert summary.totalSpent == 900
    assert summary.remaining == 600
    assert summary.percentageUsed == 60
    assert summary.isOverBudget is False


def test_summarize_budget_without_budget():
    summary = summarize_budget([{"budgeted": 0, "spent": 120}])

    assert summary.percentageUsed == 0
    assert summary.remaining == -120
    assert summary.isOverBudget is True


def test_summarize_empty_budget():
    summary = summarize_budget([])

    assert summary.totalBudgeted == 0
    assert summary.percentageUsed == 0
    assert summary.isOverBudget is False


def test_budget_alert_warning_above_ninety_percent():
    alerts = compute_budget_alerts([{"category": "Venue", "budgeted": 1000, "spent": 950}])

    assert len(alerts) == 1
    assert alerts[0].type == "warning"
    assert alerts[0].percentage == 95


def test_budget_alert_error_when_over_budget():
    alerts = compute_budget_alerts([{"category": "Catering", "budgeted": 1000, "spent": 1100}])

    assert len(alerts) == 1
    assert alerts[0].type == "error"
    assert alerts[0].percentage == 110
    assert "$100" in alerts[0].message


def test_no_alert_below_threshold():
    assert compute_budget_alerts([{"category": "Flowers", "budgeted": 1000, "spent": 800}]) == []


def test_exactly_at_budget_is_a_warning():
    alerts = compute_budget_alerts([{"category": "Music", "budgeted": 1000, "spent": 1000}])

    assert [a.type for a in alerts] == ["warning"]


def test_item_without_budget_never_alerts():
    assert compute_budget_alerts([{"category": "Other", "budgeted": 0, "spent": 50}]) == []


def test_booking_expense_adds_to_existing_category(supabase):
    supabase.respond("budget_items", [{
        "id": "b1", "event_id": "e1", "category": "Photography",
        "budgeted": 3000, "spent": 500, "vendors": ["Old Studio"]
    }])
    supabase.respond("budget_items", [{
        "id": "b1", "event_id": "e1", "category": "Photography",
        "budgeted": 3000, "spent": 2500, "remaining": 500, "vendors": ["Old Studio", "Lens & Light"]
    }])

    item = BudgetService(supabase).update_budget_with_booking("e1", "Photography", 2000, "Lens & Light")

    update = supabase.queries_for("budget_items", "update")[0].called("update")[0]
    assert update[1][0] == {"spent": 2500, "remaining": 500, "vendors": ["Old Studio", "Lens & Light"]}
    assert item.spent == 2500


def test_booking_expense_creates_missing_category(supabase):
    supabase.respond("budget_items", [])
    supabase.respond("budget_items", [{
        "id": "b2", "event_id": "e1", "category": "Catering",
        "budgeted": 1200, "spent": 1000, "remaining": 200, "vendors": ["Feast Co"]
    }])

    BudgetService(supabase).update_budget_with_booking("e1", "Catering", 1000, "Feast Co")

    inserted = supabase.queries_for("budget_items", "insert")[0].called("insert")[0][1][0]
    assert inserted["budgeted"] == 1000 * BOOKING_BUDGET_HEADROOM
    assert inserted["spent"] == 1000
    assert inserted["vendors"] == ["Feast Co"]


def test_initialize_default_budget_splits_total(supabase):
    BudgetService(supabase).initialize_default_budget("e1", 10000)

    rows = supabase.queries_for("budget_items", "insert")[0].called("insert")[0][1][0]
    assert [(r["category"], r["budgeted"]) for r in rows] == [
        ("Venue", 4000),
        ("Catering", 3000),
        ("Photography", 1000),
        ("Flowers", 800),
        ("Music", 500),
        ("Attire", 400),
        ("Transportation", 200),
        ("Miscellaneous", 100),
    ]
    assert all(r["spent"] == 0 and r["remaining"] == r["budgeted"] for r in rows)
    assert all(r["event_id"] == "e1" for r in rows)
