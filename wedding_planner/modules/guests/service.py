from supabase import Client
from wedding_planner.core.math_utils import percentage
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.guests.models import CSV_COLUMNS
from wedding_planner.modules.guests.schemas import (
    GuestCreate, GuestUpdate, GuestResponse, GuestImportRow, RSVPStats
)
from typing import Any, Dict, Iterable, List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import csv
import io
import logging

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "yes", "y", "1", "x"}


def compute_rsvp_stats(guests: Iterable[Dict[str, Any]]) -> RSVPStats:
    guests = list(guests)
    total = len(guests)
    attending = len([g for g in guests if g.get("rsvp_status") == "attending"])
    declined = len([g for g in guests if g.get("rsvp_status") == "declined"])
    pending = len([g for g in guests if g.get("rsvp_status") == "pending"])
    # A plus-one only counts once it has a name
    plus_ones = len([
        g for g in guests
        if g.get("rsvp_status") == "attending" and g.get("plus_one") and g.get("plus_one_name")
    ])
    return RSVPStats(
        total=total,
        attending=attending,
        declined=declined,
        pending=pending,
        plusOnes=plus_ones,
        totalAttending=attending + plus_ones,
        responseRate=percentage(attending + declined, total)
    )


def group_guests_by_table(guests: Iterable[Dict[str, Any]]) -> Dict[int, List[Dict[str, Any]]]:
    """Bucket guests by table number; unseated guests land under 0"""
    grouped: Dict[int, List[Dict[str, Any]]] = {}
    for guest in guests:
        table_number = guest.get("table_number") or 0
        grouped.setdefault(table_number, []).append(guest)
    return grouped


def parse_guest_csv(content: str) -> List[GuestImportRow]:
    """Parse a guest list CSV with a header row. Unknown columns are ignored, rows without a name skipped."""
    reader = csv.DictReader(io.StringIO(content))
    if not reader.fieldnames or "name" not in [f.strip().lower() for f in reader.fieldnames]:
        raise HTTPException(status_code=400, detail="CSV must have a header row with a 'name' column")

    rows = []
    for raw in reader:
        # Fields beyond the header are collected under the None key
        row = {
            key.strip().lower(): (value or "").strip()
            for key, value in raw.items()
            if key is not None
        }
        if not row.get("name"):
            continue
        data = {column: row[column] for column in CSV_COLUMNS if row.get(column)}
        data["plus_one"] = row.get("plus_one", "").lower() in _TRUTHY
        rows.append(GuestImportRow(**data))
    return rows


class GuestService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_event_guests(self, event_id: str) -> List[GuestResponse]:
        """Guests of one event ordered by name"""
        try:
            result = self.supabase.table("guests")\
                .select("*")\
                .eq("event_id", event_id)\
                .order("name", desc=False)\
                .execute()
            return [GuestResponse(**guest) for guest in result.data]
        except Exception as e:
            logger.error(f"Error fetching guests: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_guests(self, user_id: Optional[str]) -> List[GuestResponse]:
        """Guests across all events created by the user"""
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("guests")\
                .select("*, events!inner(title, date, venue, created_by)")\
                .eq("events.created_by", user_id)\
                .order("name", desc=False)\
                .execute()
            return [GuestResponse(**guest) for guest in result.data]
        except Exception as e:
            logger.error(f"Error fetching user guests: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_guests_by_email(self, email: Optional[str]) -> List[GuestResponse]:
        """Invitations addressed to an email, used by the guest dashboard"""
        if not email:
            return []
        try:
            result = self.supabase.table("guests")\
                .select("*, events(title, date, venue, is_public)")\
                .eq("email", email)\
                .execute()
            return [GuestResponse(**guest) for guest in result.data]
        except Exception as e:
            logger.error(f"Error fetching invitations: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_guest_by_id(self, guest_id: str) -> GuestResponse:
        try:
            result = self.supabase.table("guests")\
                .select("*")\
                .eq("id", guest_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Guest not found")

            return GuestResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching guest: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_guest(self, guest_data: GuestCreate) -> GuestResponse:
        """Create a new guest"""
        try:
            result = self.supabase.table("guests").insert(guest_data.model_dump(mode="json")).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create guest")

            return GuestResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating guest: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_guest(self, guest_id: str, guest_data: GuestUpdate) -> GuestResponse:
        """Partial update of a guest"""
        try:
            update_data = guest_data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                raise HTTPException(status_code=400, detail="No fields to update")

            return self._patch(guest_id, update_data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating guest: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _patch(self, guest_id: str, update_data: Dict[str, Any]) -> GuestResponse:
        result = self.supabase.table("guests")\
            .update(update_data)\
            .eq("id", guest_id)\
            .execute()

        if not result.data:
            raise HTTPException(status_code=404, detail="Guest not found")

        return GuestResponse(**result.data[0])

    def delete_guest(self, guest_id: str) -> bool:
        """Delete guest"""
        try:
            self.supabase.table("guests")\
                .delete()\
                .eq("id", guest_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting guest: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_rsvp(self, guest_id: str, status: str, plus_one_name: Optional[str] = None) -> GuestResponse:
        """Record an RSVP answer and when it was given"""
        update_data = {
            "rsvp_status": status,
            "responded_at": datetime.now(timezone.utc).isoformat()
        }
        if plus_one_name is not None:
            update_data["plus_one_name"] = plus_one_name
        try:
            return self._patch(guest_id, update_data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating RSVP: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_rsvp_stats(self, event_id: str) -> RSVPStats:
        """RSVP counts for one event"""
        try:
            result = self.supabase.table("guests")\
                .select("rsvp_status, plus_one, plus_one_name")\
                .eq("event_id", event_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching RSVP stats: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return compute_rsvp_stats(result.data or [])

    def send_rsvp_reminders(self, event_id: str) -> List[GuestResponse]:
        """Collect guests who have not answered yet. Delivery is left to the caller."""
        try:
            result = self.supabase.table("guests")\
                .select("*")\
                .eq("event_id", event_id)\
                .eq("rsvp_status", "pending")\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching pending RSVPs: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        pending = [GuestResponse(**guest) for guest in result.data]
        logger.info(f"Sending RSVP reminders to {len(pending)} guests of event {event_id}")
        return pending

    def import_guests(self, event_id: str, guests: List[GuestImportRow]) -> List[GuestResponse]:
        """Bulk insert guests; everyone starts as pending"""
        if not guests:
            return []
        rows = [
            {**guest.model_dump(exclude_none=True), "event_id": event_id, "rsvp_status": "pending"}
            for guest in guests
        ]
        try:
            result = self.supabase.table("guests").insert(rows).execute()
            logger.info(f"Imported {len(result.data or [])} guests into event {event_id}")
            return [GuestResponse(**guest) for guest in result.data]
        except Exception as e:
            logger.error(f"Error importing guests: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_guests_by_table(self, event_id: str) -> Dict[int, List[GuestResponse]]:
        """Attending guests grouped by table number (0 = not seated yet)"""
        try:
            result = self.supabase.table("guests")\
                .select("*")\
                .eq("event_id", event_id)\
                .eq("rsvp_status", "attending")\
                .order("table_number", desc=False)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching guests by table: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        grouped = group_guests_by_table(result.data or [])
        return {
            table_number: [GuestResponse(**guest) for guest in table_guests]
            for table_number, table_guests in grouped.items()
        }
