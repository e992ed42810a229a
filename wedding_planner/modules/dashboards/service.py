import asyncio
from datetime import date
from typing import Any, Iterable, List, Optional

from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool
from supabase import Client

from wedding_planner.core.session import SessionContext
from wedding_planner.modules.bookings.schemas import BookingResponse
from wedding_planner.modules.bookings.service import BookingService
from wedding_planner.modules.budget.service import BudgetService
from wedding_planner.modules.dashboards.schemas import (
    AdminDashboard, CoupleDashboard, EventOverview, GeneralDashboard, GuestDashboard,
    PlatformStats, VendorBookingStats, VendorDashboard
)
from wedding_planner.modules.events.schemas import EventResponse
from wedding_planner.modules.events.service import EventService
from wedding_planner.modules.favorites.service import FavoriteService
from wedding_planner.modules.guests.service import GuestService
from wedding_planner.modules.messages.service import MessageService
from wedding_planner.modules.reviews.service import ReviewService
from wedding_planner.modules.tasks.service import TaskService
from wedding_planner.modules.users.service import UserService
from wedding_planner.modules.vendors.service import VendorService
import logging

logger = logging.getLogger(__name__)

UPCOMING_BOOKINGS_LIMIT = 5


def _in_month(value: Any, today: date) -> bool:
    if not value:
        return False
    day = value.date() if hasattr(value, "date") else value
    return day.year == today.year and day.month == today.month


def compute_vendor_booking_stats(
    bookings: Iterable[BookingResponse],
    today: Optional[date] = None
) -> VendorBookingStats:
    """Revenue counts completed bookings only; the monthly figures use the booking's creation date"""
    today = today or date.today()
    bookings = list(bookings)
    this_month = [b for b in bookings if _in_month(b.created_at, today)]
    return VendorBookingStats(
        totalRevenue=sum(b.amount for b in bookings if b.status == "completed"),
        confirmedBookings=len([b for b in bookings if b.status == "confirmed"]),
        pendingBookings=len([b for b in bookings if b.status == "pending"]),
        completedEvents=len([b for b in bookings if b.status == "completed"]),
        monthlyBookings=len(this_month),
        monthlyRevenue=sum(b.amount for b in this_month if b.status == "completed")
    )


def upcoming_confirmed_bookings(
    bookings: Iterable[BookingResponse],
    today: Optional[date] = None,
    limit: int = UPCOMING_BOOKINGS_LIMIT
) -> List[BookingResponse]:
    today = today or date.today()
    upcoming = [b for b in bookings if b.status == "confirmed" and b.date and b.date > today]
    return sorted(upcoming, key=lambda b: b.date)[:limit]


def pick_current_event(events: List[EventResponse], today: Optional[date] = None) -> Optional[EventResponse]:
    """The next event still ahead and not cancelled, otherwise the first one"""
    today = today or date.today()
    ahead = [e for e in events if e.date and e.date >= today and e.status != "cancelled"]
    if ahead:
        return min(ahead, key=lambda e: e.date)
    return events[0] if events else None


class DashboardService:
    """Per-role landing payloads; each one runs its queries concurrently"""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    async def _event_overview(self, event: EventResponse, user_id: str) -> EventOverview:
        budget = BudgetService(self.supabase)
        summary, alerts, rsvp, tasks = await asyncio.gather(
            run_in_threadpool(budget.get_budget_summary, event.id),
            run_in_threadpool(budget.get_budget_alerts, event.id),
            run_in_threadpool(GuestService(self.supabase).get_rsvp_stats, event.id),
            run_in_threadpool(TaskService(self.supabase).get_task_stats, user_id, event.id),
        )
        days_until = (event.date - date.today()).days if event.date else None
        return EventOverview(
            event=event,
            daysUntil=days_until,
            budget=summary,
            budgetAlerts=alerts,
            rsvp=rsvp,
            tasks=tasks
        )

    async def get_couple_dashboard(self, session: SessionContext) -> CoupleDashboard:
        user_id = session.user_id
        tasks = TaskService(self.supabase)
        events, task_stats, upcoming, overdue, bookings, unread = await asyncio.gather(
            run_in_threadpool(EventService(self.supabase).get_user_events, user_id),
            run_in_threadpool(tasks.get_task_stats, user_id),
            run_in_threadpool(tasks.get_upcoming_tasks, user_id),
            run_in_threadpool(tasks.get_overdue_tasks, user_id),
            run_in_threadpool(BookingService(self.supabase).get_user_bookings, user_id),
            run_in_threadpool(MessageService(self.supabase).get_unread_message_count, user_id),
        )

        current = pick_current_event(events)
        overview = await self._event_overview(current, user_id) if current else None

        return CoupleDashboard(
            events=events,
            currentEvent=overview,
            taskStats=task_stats,
            upcomingTasks=upcoming,
            overdueTasks=overdue,
            bookings=bookings,
            unreadMessages=unread
        )

    async def get_vendor_dashboard(self, session: SessionContext) -> VendorDashboard:
        user_id = session.user_id
        vendor, bookings, reviews, unread = await asyncio.gather(
            run_in_threadpool(VendorService(self.supabase).get_current_vendor_profile, user_id),
            run_in_threadpool(BookingService(self.supabase).get_vendor_bookings, user_id),
            run_in_threadpool(ReviewService(self.supabase).get_vendor_reviews, user_id),
            run_in_threadpool(MessageService(self.supabase).get_unread_message_count, user_id),
        )
        return VendorDashboard(
            vendor=vendor,
            bookings=bookings,
            upcomingBookings=upcoming_confirmed_bookings(bookings),
            stats=compute_vendor_booking_stats(bookings),
            reviews=reviews,
            unreadMessages=unread
        )

    async def get_guest_dashboard(self, session: SessionContext) -> GuestDashboard:
        user_id = session.user_id
        invitations, public_events, featured, favorites, unread = await asyncio.gather(
            run_in_threadpool(GuestService(self.supabase).get_guests_by_email, session.email),
            run_in_threadpool(EventService(self.supabase).get_public_events),
            run_in_threadpool(VendorService(self.supabase).get_featured_vendors),
            run_in_threadpool(FavoriteService(self.supabase).get_favorite_vendors, user_id),
            run_in_threadpool(MessageService(self.supabase).get_unread_message_count, user_id),
        )
        return GuestDashboard(
            invitations=invitations,
            publicEvents=public_events,
            featuredVendors=featured,
            favoriteVendors=favorites,
            unreadMessages=unread
        )

    async def get_general_dashboard(self, session: Optional[SessionContext]) -> GeneralDashboard:
        """Landing page data; favorites only for signed-in callers"""
        calls = [
            run_in_threadpool(EventService(self.supabase).get_public_events),
            run_in_threadpool(VendorService(self.supabase).get_featured_vendors),
        ]
        if session is not None:
            calls.append(run_in_threadpool(FavoriteService(self.supabase).get_favorite_vendors, session.user_id))

        results = await asyncio.gather(*calls)
        return GeneralDashboard(
            publicEvents=results[0],
            featuredVendors=results[1],
            favoriteVendors=results[2] if len(results) > 2 else []
        )

    def _count(self, table: str, **filters: Any) -> int:
        try:
            query = self.supabase.table(table).select("id", count="exact")
            for column, value in filters.items():
                query = query.eq(column, value)
            return query.execute().count or 0
        except Exception as e:
            logger.error(f"Error counting {table}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def get_admin_dashboard(self, session: SessionContext) -> AdminDashboard:
        users, vendors, events, pending_users, pending_vendors = await asyncio.gather(
            run_in_threadpool(self._count, "users"),
            run_in_threadpool(self._count, "vendors"),
            run_in_threadpool(self._count, "events", status="planning"),
            run_in_threadpool(UserService(self.supabase).list_pending_approvals),
            run_in_threadpool(VendorService(self.supabase).list_pending_vendors),
        )
        return AdminDashboard(
            stats=PlatformStats(
                totalUsers=users,
                totalVendors=vendors,
                activeEvents=events,
                pendingApprovals=len(pending_users) + len(pending_vendors)
            ),
            pendingUsers=pending_users,
            pendingVendors=pending_vendors
        )
