from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.guests.schemas import (
    GuestCreate, GuestUpdate, GuestResponse, GuestImportRequest, RSVPUpdate, RSVPStats
)
from wedding_planner.modules.guests.service import GuestService, parse_guest_csv
from wedding_planner.core.dependencies import get_session, check_event_access, check_record_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import Dict, List

router = APIRouter(prefix="/guests", tags=["guests"])


def get_guest_service(supabase: Client = Depends(get_supabase)) -> GuestService:
    return GuestService(supabase)


@router.get("", response_model=List[GuestResponse])
async def list_my_guests(
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service)
):
    """Guests across all of the caller's events"""
    return service.get_user_guests(session.user_id)


@router.get("/invitations", response_model=List[GuestResponse])
async def list_my_invitations(
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service)
):
    """Guest rows addressed to the caller's email"""
    return service.get_guests_by_email(session.email)


@router.get("/event/{event_id}", response_model=List[GuestResponse])
async def list_event_guests(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_event_guests(event_id)


@router.get("/event/{event_id}/stats", response_model=RSVPStats)
async def get_rsvp_stats(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_rsvp_stats(event_id)


@router.get("/event/{event_id}/by-table", response_model=Dict[int, List[GuestResponse]])
async def get_guests_by_table(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_guests_by_table(event_id)


@router.post("/event/{event_id}/reminders", response_model=List[GuestResponse])
async def send_rsvp_reminders(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    """Guests who still need an RSVP reminder"""
    check_event_access(event_id, session, supabase)
    return service.send_rsvp_reminders(event_id)


@router.post("/event/{event_id}/import", response_model=List[GuestResponse], status_code=201)
async def import_guests(
    event_id: str,
    import_data: GuestImportRequest,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    """Bulk import guests from JSON rows"""
    check_event_access(event_id, session, supabase)
    return service.import_guests(event_id, import_data.guests)


@router.post("/event/{event_id}/import-csv", response_model=List[GuestResponse], status_code=201)
async def import_guests_csv(
    event_id: str,
    file: UploadFile = File(...),
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    """Bulk import guests from a CSV file with a header row"""
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are accepted")
    check_event_access(event_id, session, supabase)
    try:
        content = (await file.read()).decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CSV must be UTF-8 encoded")
    return service.import_guests(event_id, parse_guest_csv(content))


@router.post("", response_model=GuestResponse, status_code=201)
async def create_guest(
    guest_data: GuestCreate,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(guest_data.event_id, session, supabase)
    return service.create_guest(guest_data)


@router.put("/{guest_id}", response_model=GuestResponse)
async def update_guest(
    guest_id: str,
    guest_data: GuestUpdate,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("guests", guest_id, session, supabase)
    return service.update_guest(guest_id, guest_data)


@router.put("/{guest_id}/rsvp", response_model=GuestResponse)
async def update_rsvp(
    guest_id: str,
    rsvp: RSVPUpdate,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    """Answer an invitation: the invited guest (matched by email) or the event owner"""
    guest = service.get_guest_by_id(guest_id)
    guest_email = (guest.email or "").lower()
    if not session.email or guest_email != session.email.lower():
        check_event_access(guest.event_id, session, supabase)
    return service.update_rsvp(guest_id, rsvp.status, rsvp.plus_one_name)


@router.delete("/{guest_id}", status_code=204)
async def delete_guest(
    guest_id: str,
    session: SessionContext = Depends(get_session),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("guests", guest_id, session, supabase)
    service.delete_guest(guest_id)
    return None
