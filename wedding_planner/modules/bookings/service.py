from supabase import Client
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.bookings.schemas import BookingCreate, BookingUpdate, BookingResponse
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

COUPLE_BOOKING_COLUMNS = "*, vendors(name, category, location, photos), events(title, date, venue)"
VENDOR_BOOKING_COLUMNS = "*, users!bookings_couple_id_fkey(name, email), events(title, date, venue, location)"


class BookingService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_booking(self, booking_data: BookingCreate, user_id: Optional[str]) -> BookingResponse:
        """Create a booking request on behalf of the calling couple"""
        user_id = ensure_authenticated(user_id)
        try:
            data = booking_data.model_dump(mode="json")
            data["couple_id"] = user_id

            result = self.supabase.table("bookings").insert(data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create booking")

            logger.info(f"Booking created for vendor {booking_data.vendor_id} by {user_id}")
            return BookingResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating booking: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_booking_by_id(self, booking_id: str) -> BookingResponse:
        try:
            result = self.supabase.table("bookings")\
                .select("*")\
                .eq("id", booking_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Booking not found")

            return BookingResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_bookings(self, user_id: Optional[str]) -> List[BookingResponse]:
        """Bookings made by a couple, with vendor and event summaries, soonest first"""
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("bookings")\
                .select(COUPLE_BOOKING_COLUMNS)\
                .eq("couple_id", user_id)\
                .order("date", desc=False)\
                .execute()
            return [BookingResponse(**booking) for booking in result.data]
        except Exception as e:
            logger.error(f"Error fetching user bookings: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_vendor_bookings(self, vendor_id: Optional[str]) -> List[BookingResponse]:
        """Bookings received by a vendor, with couple and event summaries, soonest first"""
        vendor_id = ensure_authenticated(vendor_id)
        try:
            result = self.supabase.table("bookings")\
                .select(VENDOR_BOOKING_COLUMNS)\
                .eq("vendor_id", vendor_id)\
                .order("date", desc=False)\
                .execute()
            return [BookingResponse(**booking) for booking in result.data]
        except Exception as e:
            logger.error(f"Error fetching vendor bookings: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_event_bookings(self, event_id: str) -> List[BookingResponse]:
        try:
            result = self.supabase.table("bookings")\
                .select("*, vendors(name, category, location, photos)")\
                .eq("event_id", event_id)\
                .order("date", desc=False)\
                .execute()
            return [BookingResponse(**booking) for booking in result.data]
        except Exception as e:
            logger.error(f"Error fetching event bookings: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _update(self, booking_id: str, update_data: Dict[str, Any]) -> BookingResponse:
        result = self.supabase.table("bookings")\
            .update(update_data)\
            .eq("id", booking_id)\
            .execute()

        if not result.data:
            raise HTTPException(status_code=404, detail="Booking not found")

        return BookingResponse(**result.data[0])

    def update_booking_status(self, booking_id: str, status: str) -> BookingResponse:
        """Set any status; transitions are not restricted"""
        try:
            booking = self._update(booking_id, {"status": status})
            logger.info(f"Booking {booking_id} status set to {status}")
            return booking
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating booking status: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_booking(self, booking_id: str, booking_data: BookingUpdate) -> BookingResponse:
        try:
            update_data = booking_data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                return self.get_booking_by_id(booking_id)
            return self._update(booking_id, update_data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating booking: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_booking(self, booking_id: str) -> bool:
        try:
            self.supabase.table("bookings")\
                .delete()\
                .eq("id", booking_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting booking: {e}")
            raise HTTPException(status_code=500, detail=str(e))
