from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.bookings.schemas import (
    BookingCreate, BookingUpdate, BookingStatusUpdate, BookingResponse
)
from wedding_planner.modules.bookings.service import BookingService
from wedding_planner.modules.budget.service import BudgetService
from wedding_planner.modules.vendors.service import VendorService
from wedding_planner.core.dependencies import (
    get_session, require_role, check_event_access, check_booking_party
)
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


def get_booking_service(supabase: Client = Depends(get_supabase)) -> BookingService:
    return BookingService(supabase)


def record_confirmed_booking(booking: BookingResponse, supabase: Client) -> None:
    """Book a confirmed amount into the event budget under the vendor's category"""
    if not booking.event_id:
        return
    vendor = VendorService(supabase).get_vendor_by_id(booking.vendor_id)
    BudgetService(supabase).update_budget_with_booking(
        booking.event_id, vendor.category, booking.amount, vendor.name
    )
    logger.info(f"Booking {booking.id} added {booking.amount} to {vendor.category} budget")


@router.get("", response_model=List[BookingResponse])
async def list_my_bookings(
    session: SessionContext = Depends(get_session),
    service: BookingService = Depends(get_booking_service)
):
    """Bookings the caller made as a couple"""
    return service.get_user_bookings(session.user_id)


@router.get("/vendor", response_model=List[BookingResponse])
async def list_vendor_bookings(
    session: SessionContext = Depends(require_role("vendor")),
    service: BookingService = Depends(get_booking_service)
):
    """Bookings the calling vendor received"""
    return service.get_vendor_bookings(session.user_id)


@router.get("/event/{event_id}", response_model=List[BookingResponse])
async def list_event_bookings(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: BookingService = Depends(get_booking_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_event_bookings(event_id)


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    booking_data: BookingCreate,
    session: SessionContext = Depends(require_role("couple")),
    service: BookingService = Depends(get_booking_service),
    supabase: Client = Depends(get_supabase)
):
    if booking_data.event_id:
        check_event_access(booking_data.event_id, session, supabase)
    booking = service.create_booking(booking_data, session.user_id)
    if booking.status == "confirmed":
        record_confirmed_booking(booking, supabase)
    return booking


@router.put("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: str,
    status_update: BookingStatusUpdate,
    session: SessionContext = Depends(get_session),
    service: BookingService = Depends(get_booking_service),
    supabase: Client = Depends(get_supabase)
):
    """Set the booking status; confirming it records the amount in the event budget"""
    check_booking_party(booking_id, session, supabase)
    previous = service.get_booking_by_id(booking_id)
    booking = service.update_booking_status(booking_id, status_update.status)
    if booking.status == "confirmed" and previous.status != "confirmed":
        record_confirmed_booking(booking, supabase)
    return booking


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: str,
    booking_data: BookingUpdate,
    session: SessionContext = Depends(get_session),
    service: BookingService = Depends(get_booking_service),
    supabase: Client = Depends(get_supabase)
):
    check_booking_party(booking_id, session, supabase)
    return service.update_booking(booking_id, booking_data)


@router.delete("/{booking_id}", status_code=204)
async def delete_booking(
    booking_id: str,
    session: SessionContext = Depends(get_session),
    service: BookingService = Depends(get_booking_service),
    supabase: Client = Depends(get_supabase)
):
    check_booking_party(booking_id, session, supabase)
    service.delete_booking(booking_id)
    return None
