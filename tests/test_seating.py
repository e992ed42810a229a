from wedding_planner.modules.seating.service import SeatingService, plan_table_assignments


def guest(guest_id, plus_one_name=None, table_number=None):
    return {
        "id": guest_id,
        "plus_one": plus_one_name is not None,
        "plus_one_name": plus_one_name,
        "table_number": table_number,
    }


TWO_SMALL_TABLES = [{"number": 1, "seats": 2}, {"number": 2, "seats": 2}]


def test_fills_tables_in_order():
    assignments = plan_table_assignments(TWO_SMALL_TABLES, [guest("g1"), guest("g2"), guest("g3")])

    assert assignments == [("g1", 1), ("g2", 1), ("g3", 2)]


def test_party_that_does_not_fit_after_last_table_stays_unseated():
    guests = [guest("g1"), guest("g2"), guest("g3"), guest("g4", plus_one_name="Sam")]

    assignments = plan_table_assignments(TWO_SMALL_TABLES, guests)

    assert ("g4", 2) not in assignments
    assert [g for g, _ in assignments] == ["g1", "g2", "g3"]


def test_already_seated_guests_are_left_alone():
    guests = [guest("g1", table_number=5), guest("g2")]

    assert plan_table_assignments(TWO_SMALL_TABLES, guests) == [("g2", 1)]


def test_unnamed_plus_one_takes_a_single_seat():
    guests = [
        {"id": "g1", "plus_one": True, "plus_one_name": None},
        {"id": "g2", "plus_one": False},
    ]

    assert plan_table_assignments(TWO_SMALL_TABLES, guests) == [("g1", 1), ("g2", 1)]


def test_tables_default_to_eight_seats():
    guests = [guest(f"g{i}") for i in range(9)]

    assignments = plan_table_assignments([{"number": 1}], guests, default_seats=8)

    assert len(assignments) == 8
    assert {table for _, table in assignments} == {1}


def test_next_table_is_not_rechecked_for_capacity():
    tables = [{"number": 1, "seats": 1}, {"number": 2, "seats": 1}]

    assignments = plan_table_assignments(tables, [guest("g1"), guest("g2", plus_one_name="Sam")])

    assert assignments == [("g1", 1), ("g2", 2)]


def test_no_tables_assigns_nobody():
    assert plan_table_assignments([], [guest("g1"), guest("g2")]) == []


def test_table_without_number_takes_nobody():
    assert plan_table_assignments([{"seats": 4}], [guest("g1")]) == []


def test_auto_assign_writes_table_numbers(supabase):
    supabase.respond("seating_plans", {
        "id": "p1", "event_id": "e1", "name": "Reception", "layout": "round", "tables": TWO_SMALL_TABLES
    })

    result = SeatingService(supabase).auto_assign_guests(
        "p1", [guest("g1"), guest("g2"), guest("g3"), guest("g4", plus_one_name="Sam")]
    )

    updates = supabase.queries_for("guests", "update")
    assert [q.called("update")[0][1][0] for q in updates] == [
        {"table_number": 1}, {"table_number": 1}, {"table_number": 2}
    ]
    assert [q.called("eq")[0][1] for q in updates] == [("id", "g1"), ("id", "g2"), ("id", "g3")]
    assert result.assigned == 3
    assert result.unassigned == 1


def test_seating_stats_cover_attending_guests(supabase):
    supabase.respond("seating_plans", [{"id": "p1", "event_id": "e1", "name": "Reception"}])
    supabase.respond("guests", [
        {"id": "g1", "table_number": 1},
        {"id": "g2", "table_number": None},
        {"id": "g3", "table_number": 2},
    ])

    stats = SeatingService(supabase).get_seating_stats("e1")

    assert stats.totalPlans == 1
    assert stats.totalGuests == 3
    assert stats.assignedGuests == 2
    assert stats.unassignedGuests == 1
    assert stats.assignmentRate == 67
