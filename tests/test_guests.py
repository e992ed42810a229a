import pytest
from fastapi import HTTPException

from wedding_planner.modules.guests.service import (
    GuestService, compute_rsvp_stats, group_guests_by_table, parse_guest_csv
)


def test_rsvp_stats_counts_named_plus_ones_only():
    stats = compute_rsvp_stats([
        {"rsvp_status": "attending", "plus_one": True, "plus_one_name": "Sam"},
        {"rsvp_status": "attending", "plus_one": True, "plus_one_name": None},
        {"rsvp_status": "declined"},
        {"rsvp_status": "pending"},
    ])

    assert stats.total == 4
    assert stats.attending == 2
    assert stats.declined == 1
    assert stats.pending == 1
    assert stats.plusOnes == 1
    assert stats.totalAttending == 3
    assert stats.responseRate == 75


def test_rsvp_stats_empty_list():
    stats = compute_rsvp_stats([])

    assert stats.total == 0
    assert stats.responseRate == 0


def test_group_guests_by_table_puts_unseated_under_zero():
    grouped = group_guests_by_table([
        {"id": "g1", "table_number": 1},
        {"id": "g2", "table_number": None},
        {"id": "g3", "table_number": 1},
    ])

    assert [g["id"] for g in grouped[1]] == ["g1", "g3"]
    assert [g["id"] for g in grouped[0]] == ["g2"]


def test_parse_guest_csv():
    content = (
        "Name,Email,Plus_One,Dietary_Restrictions,Favourite Colour\n"
        "Ana Lopez,ana@example.com,yes,vegetarian,blue\n"
        ",nobody@example.com,no,,\n"
        "Ben Ito,,,,\n"
    )

    rows = parse_guest_csv(content)

    assert [r.name for r in rows] == ["Ana Lopez", "Ben Ito"]
    assert rows[0].email == "ana@example.com"
    assert rows[0].plus_one is True
    assert rows[0].dietary_restrictions == "vegetarian"
    assert rows[1].email is None
    assert rows[1].plus_one is False


def test_parse_guest_csv_requires_name_column():
    with pytest.raises(HTTPException) as exc:
        parse_guest_csv("email\nana@example.com\n")

    assert exc.value.status_code == 400


def test_update_rsvp_stamps_response_time(supabase):
    supabase.respond("guests", [{
        "id": "g1", "event_id": "e1", "name": "Ana", "rsvp_status": "attending",
        "plus_one_name": "Sam"
    }])

    guest = GuestService(supabase).update_rsvp("g1", "attending", "Sam")

    payload = supabase.queries_for("guests", "update")[0].called("update")[0][1][0]
    assert payload["rsvp_status"] == "attending"
    assert payload["plus_one_name"] == "Sam"
    assert "responded_at" in payload
    assert guest.rsvp_status == "attending"


def test_parse_guest_csv_ignores_fields_beyond_the_header():
    rows = parse_guest_csv("name,email\nAda,ada@example.com,extra\nBo\n")

    assert [r.name for r in rows] == ["Ada", "Bo"]
    assert rows[0].email == "ada@example.com"
    assert rows[1].email is None


def test_get_guest_by_id_not_found(supabase):
    supabase.respond("guests", None)

    with pytest.raises(HTTPException) as exc:
        GuestService(supabase).get_guest_by_id("missing")

    assert exc.value.status_code == 404
