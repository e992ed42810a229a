from datetime import date, datetime, timezone

from wedding_planner.modules.bookings.schemas import BookingResponse
from wedding_planner.modules.dashboards.service import (
    compute_vendor_booking_stats, pick_current_event, upcoming_confirmed_bookings
)
from wedding_planner.modules.events.schemas import EventResponse

TODAY = date(2025, 6, 15)


def booking(booking_id, status, amount, day, created=datetime(2025, 6, 1, tzinfo=timezone.utc)):
    return BookingResponse(
        id=booking_id, vendor_id="v1", service="Photography", status=status,
        amount=amount, date=day, created_at=created
    )


def event(event_id, day, status="planning"):
    return EventResponse(id=event_id, title=event_id, date=day, venue="Hall", created_by="user-1", status=status)


def test_vendor_booking_stats():
    bookings = [
        booking("b1", "completed", 1000, date(2025, 5, 1), created=datetime(2025, 4, 1, tzinfo=timezone.utc)),
        booking("b2", "completed", 500, date(2025, 6, 10)),
        booking("b3", "confirmed", 800, date(2025, 7, 1)),
        booking("b4", "pending", 300, date(2025, 8, 1)),
    ]

    stats = compute_vendor_booking_stats(bookings, today=TODAY)

    assert stats.totalRevenue == 1500
    assert stats.confirmedBookings == 1
    assert stats.pendingBookings == 1
    assert stats.completedEvents == 2
    assert stats.monthlyBookings == 3
    assert stats.monthlyRevenue == 500


def test_upcoming_confirmed_bookings_sorted_and_future_only():
    bookings = [
        booking("late", "confirmed", 1, date(2025, 9, 1)),
        booking("past", "confirmed", 1, date(2025, 6, 1)),
        booking("soon", "confirmed", 1, date(2025, 7, 1)),
        booking("pending", "pending", 1, date(2025, 7, 2)),
    ]

    upcoming = upcoming_confirmed_bookings(bookings, today=TODAY)

    assert [b.id for b in upcoming] == ["soon", "late"]


def test_pick_current_event_prefers_next_active_event():
    events = [
        event("past", date(2025, 1, 1)),
        event("cancelled", date(2025, 7, 1), status="cancelled"),
        event("next", date(2025, 8, 1)),
        event("later", date(2026, 1, 1)),
    ]

    assert pick_current_event(events, today=TODAY).id == "next"


def test_pick_current_event_falls_back_to_first():
    events = [event("past", date(2025, 1, 1))]

    assert pick_current_event(events, today=TODAY).id == "past"
    assert pick_current_event([], today=TODAY) is None
