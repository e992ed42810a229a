from supabase import Client
from wedding_planner.config import settings
from wedding_planner.core.math_utils import percentage
from wedding_planner.modules.seating.schemas import (
    SeatingPlanCreate, SeatingPlanUpdate, SeatingPlanResponse,
    AutoAssignResult, TableAssignment, SeatingStats
)
from typing import Any, Dict, Iterable, List, Optional, Tuple
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def seats_needed(guest: Dict[str, Any]) -> int:
    return 2 if guest.get("plus_one") and guest.get("plus_one_name") else 1


def plan_table_assignments(
    tables: List[Dict[str, Any]],
    guests: Iterable[Dict[str, Any]],
    default_seats: Optional[int] = None
) -> List[Tuple[str, int]]:
    """
    Greedy seating pass over unseated guests, in input order.

    A cursor walks the tables in plan order. When a guest does not fit in
    what is left of the current table, the cursor moves on and occupancy
    resets; once the tables run out the remaining guests stay unseated.
    The table moved to is not re-checked, so an oversized party still
    lands there. Tables without a number take nobody.
    """
    default_seats = default_seats or settings.default_table_seats
    assignments: List[Tuple[str, int]] = []
    index = 0
    capacity = (tables[0].get("seats") if tables else None) or default_seats
    occupancy = 0

    for guest in guests:
        if guest.get("table_number"):
            continue

        needed = seats_needed(guest)
        if occupancy + needed > capacity:
            index += 1
            if index >= len(tables):
                break
            capacity = tables[index].get("seats") or default_seats
            occupancy = 0

        table_number = tables[index].get("number") if index < len(tables) else None
        if table_number:
            assignments.append((guest["id"], table_number))
            occupancy += needed

    return assignments


class SeatingService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_event_seating_plans(self, event_id: str) -> List[SeatingPlanResponse]:
        try:
            result = self.supabase.table("seating_plans")\
                .select("*")\
                .eq("event_id", event_id)\
                .order("created_at", desc=True)\
                .execute()
            return [SeatingPlanResponse(**plan) for plan in result.data]
        except Exception as e:
            logger.error(f"Error fetching seating plans: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_seating_plan_by_id(self, plan_id: str) -> SeatingPlanResponse:
        try:
            result = self.supabase.table("seating_plans")\
                .select("*")\
                .eq("id", plan_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Seating plan not found")

            return SeatingPlanResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_seating_plan(self, plan_data: SeatingPlanCreate) -> SeatingPlanResponse:
        try:
            result = self.supabase.table("seating_plans").insert(plan_data.model_dump()).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create seating plan")

            return SeatingPlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating seating plan: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_seating_plan(self, plan_id: str, plan_data: SeatingPlanUpdate) -> SeatingPlanResponse:
        try:
            update_data = plan_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_seating_plan_by_id(plan_id)

            result = self.supabase.table("seating_plans")\
                .update(update_data)\
                .eq("id", plan_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Seating plan not found")

            return SeatingPlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating seating plan: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_seating_plan(self, plan_id: str) -> bool:
        try:
            self.supabase.table("seating_plans")\
                .delete()\
                .eq("id", plan_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting seating plan: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def auto_assign_guests(self, plan_id: str, guests: List[Dict[str, Any]]) -> AutoAssignResult:
        """Seat the given guests at the plan's tables and persist each guest's table_number"""
        plan = self.get_seating_plan_by_id(plan_id)
        unseated = [guest for guest in guests if not guest.get("table_number")]
        assignments = plan_table_assignments(plan.tables or [], unseated)

        try:
            for guest_id, table_number in assignments:
                self.supabase.table("guests")\
                    .update({"table_number": table_number})\
                    .eq("id", guest_id)\
                    .execute()
        except Exception as e:
            logger.error(f"Error assigning guests to tables: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        logger.info(f"Seated {len(assignments)} of {len(unseated)} guests on plan {plan_id}")
        return AutoAssignResult(
            plan_id=plan_id,
            assignments=[TableAssignment(guest_id=g, table_number=t) for g, t in assignments],
            assigned=len(assignments),
            unassigned=len(unseated) - len(assignments)
        )

    def get_seating_stats(self, event_id: str) -> SeatingStats:
        """Seating coverage over the event's attending guests"""
        plans = self.get_event_seating_plans(event_id)
        try:
            result = self.supabase.table("guests")\
                .select("id, table_number")\
                .eq("event_id", event_id)\
                .eq("rsvp_status", "attending")\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching guests for seating stats: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        guests = result.data or []
        assigned = len([g for g in guests if g.get("table_number")])
        return SeatingStats(
            totalPlans=len(plans),
            totalGuests=len(guests),
            assignedGuests=assigned,
            unassignedGuests=len(guests) - assigned,
            assignmentRate=percentage(assigned, len(guests))
        )
