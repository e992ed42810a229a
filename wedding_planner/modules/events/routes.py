from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.events.schemas import (
    EventCreate, EventUpdate, EventResponse, EventProgressResponse
)
from wedding_planner.modules.events.service import EventService
from wedding_planner.core.dependencies import get_session, get_optional_session, require_role, check_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(supabase: Client = Depends(get_supabase)) -> EventService:
    return EventService(supabase)


@router.get("", response_model=List[EventResponse])
async def list_my_events(
    session: SessionContext = Depends(get_session),
    service: EventService = Depends(get_event_service)
):
    """Events created by the caller"""
    return service.get_user_events(session.user_id)


@router.get("/public", response_model=List[EventResponse])
async def list_public_events(service: EventService = Depends(get_event_service)):
    """Public events, visible without signing in"""
    return service.get_public_events()


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    event_data: EventCreate,
    session: SessionContext = Depends(require_role("couple")),
    service: EventService = Depends(get_event_service)
):
    """Create a new event (couples and admins)"""
    return service.create_event(event_data, session.user_id)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    session: Optional[SessionContext] = Depends(get_optional_session),
    service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Get event by ID (owner, admin, or anyone for public events)"""
    check_event_access(event_id, session, supabase, allow_public=True)
    return service.get_event_by_id(event_id)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    event_data: EventUpdate,
    session: SessionContext = Depends(get_session),
    service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Update event (owner or admin)"""
    check_event_access(event_id, session, supabase)
    return service.update_event(event_id, event_data)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Delete event (owner or admin)"""
    check_event_access(event_id, session, supabase)
    service.delete_event(event_id)
    return None


@router.post("/{event_id}/progress", response_model=EventProgressResponse)
async def refresh_event_progress(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Recompute the cached task-completion progress"""
    check_event_access(event_id, session, supabase)
    return EventProgressResponse(event_id=event_id, progress=service.update_event_progress(event_id))
