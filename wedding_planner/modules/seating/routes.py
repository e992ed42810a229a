from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.seating.schemas import (
    SeatingPlanCreate, SeatingPlanUpdate, SeatingPlanResponse, AutoAssignResult, SeatingStats
)
from wedding_planner.modules.seating.service import SeatingService
from wedding_planner.modules.guests.service import GuestService
from wedding_planner.core.dependencies import get_session, check_event_access, check_record_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List

router = APIRouter(prefix="/seating", tags=["seating"])


def get_seating_service(supabase: Client = Depends(get_supabase)) -> SeatingService:
    return SeatingService(supabase)


@router.get("/event/{event_id}", response_model=List[SeatingPlanResponse])
async def list_seating_plans(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_event_seating_plans(event_id)


@router.get("/event/{event_id}/stats", response_model=SeatingStats)
async def get_seating_stats(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_seating_stats(event_id)


@router.post("", response_model=SeatingPlanResponse, status_code=201)
async def create_seating_plan(
    plan_data: SeatingPlanCreate,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(plan_data.event_id, session, supabase)
    return service.create_seating_plan(plan_data)


@router.put("/{plan_id}", response_model=SeatingPlanResponse)
async def update_seating_plan(
    plan_id: str,
    plan_data: SeatingPlanUpdate,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("seating_plans", plan_id, session, supabase)
    return service.update_seating_plan(plan_id, plan_data)


@router.post("/{plan_id}/auto-assign", response_model=AutoAssignResult)
async def auto_assign_guests(
    plan_id: str,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    """Seat the event's attending guests who have no table yet"""
    plan = check_record_event_access("seating_plans", plan_id, session, supabase)
    guests = GuestService(supabase).get_event_guests(plan["event_id"])
    attending = [g.model_dump() for g in guests if g.rsvp_status == "attending"]
    return service.auto_assign_guests(plan_id, attending)


@router.delete("/{plan_id}", status_code=204)
async def delete_seating_plan(
    plan_id: str,
    session: SessionContext = Depends(get_session),
    service: SeatingService = Depends(get_seating_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("seating_plans", plan_id, session, supabase)
    service.delete_seating_plan(plan_id)
    return None
