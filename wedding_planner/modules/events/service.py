from supabase import Client
from wedding_planner.core.math_utils import percentage
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.events.schemas import EventCreate, EventUpdate, EventResponse
from typing import List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user_events(self, user_id: Optional[str]) -> List[EventResponse]:
        """All events created by the user, soonest first"""
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("events")\
                .select("*")\
                .eq("created_by", user_id)\
                .order("date", desc=False)\
                .execute()
            return [EventResponse(**event) for event in result.data]
        except Exception as e:
            logger.error(f"Error fetching events: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_event_by_id(self, event_id: str) -> EventResponse:
        """Get event by ID"""
        try:
            result = self.supabase.table("events")\
                .select("*")\
                .eq("id", event_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Event not found")

            return EventResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching event: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_event(self, event_data: EventCreate, user_id: Optional[str]) -> EventResponse:
        """Create a new event owned by the user"""
        user_id = ensure_authenticated(user_id)
        try:
            insert_data = event_data.model_dump(mode="json")
            insert_data["created_by"] = user_id
            insert_data["progress"] = 0

            result = self.supabase.table("events").insert(insert_data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create event")

            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating event: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_event(self, event_id: str, event_data: EventUpdate) -> EventResponse:
        """Partial update of an event"""
        try:
            update_data = event_data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                return self.get_event_by_id(event_id)

            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("events")\
                .update(update_data)\
                .eq("id", event_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Event not found")

            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating event: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_event(self, event_id: str) -> bool:
        """Delete event"""
        try:
            self.supabase.table("events")\
                .delete()\
                .eq("id", event_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting event: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_public_events(self) -> List[EventResponse]:
        """Public events for guests and general visitors"""
        try:
            result = self.supabase.table("events")\
                .select("*")\
                .eq("is_public", True)\
                .order("date", desc=False)\
                .execute()
            return [EventResponse(**event) for event in result.data]
        except Exception as e:
            logger.error(f"Error fetching public events: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def calculate_event_progress(self, event_id: str) -> int:
        """Percentage of completed tasks; 0 when there are none or the lookup fails"""
        try:
            result = self.supabase.table("tasks")\
                .select("completed")\
                .eq("event_id", event_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching tasks for progress calculation: {e}")
            return 0

        tasks = result.data or []
        completed = len([task for task in tasks if task.get("completed")])
        return percentage(completed, len(tasks))

    def update_event_progress(self, event_id: str) -> int:
        """Recompute and store the cached progress of an event"""
        progress = self.calculate_event_progress(event_id)
        try:
            self.supabase.table("events")\
                .update({"progress": progress})\
                .eq("id", event_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating event progress: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return progress
