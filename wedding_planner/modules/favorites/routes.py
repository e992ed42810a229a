from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.favorites.schemas import FavoriteStatus
from wedding_planner.modules.favorites.service import FavoriteService
from wedding_planner.modules.vendors.schemas import VendorResponse
from wedding_planner.core.dependencies import get_session, get_optional_session
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/favorites", tags=["favorites"])


def get_favorite_service(supabase: Client = Depends(get_supabase)) -> FavoriteService:
    return FavoriteService(supabase)


@router.get("", response_model=List[VendorResponse])
async def list_favorite_vendors(
    session: SessionContext = Depends(get_session),
    service: FavoriteService = Depends(get_favorite_service)
):
    return service.get_favorite_vendors(session.user_id)


@router.get("/{vendor_id}", response_model=FavoriteStatus)
async def get_favorite_status(
    vendor_id: str,
    session: Optional[SessionContext] = Depends(get_optional_session),
    service: FavoriteService = Depends(get_favorite_service)
):
    user_id = session.user_id if session else None
    return FavoriteStatus(vendor_id=vendor_id, is_favorite=service.is_vendor_favorite(user_id, vendor_id))


@router.put("/{vendor_id}", response_model=FavoriteStatus)
async def add_favorite_vendor(
    vendor_id: str,
    session: SessionContext = Depends(get_session),
    service: FavoriteService = Depends(get_favorite_service)
):
    service.add_favorite_vendor(session.user_id, vendor_id)
    return FavoriteStatus(vendor_id=vendor_id, is_favorite=True)


@router.delete("/{vendor_id}", response_model=FavoriteStatus)
async def remove_favorite_vendor(
    vendor_id: str,
    session: SessionContext = Depends(get_session),
    service: FavoriteService = Depends(get_favorite_service)
):
    service.remove_favorite_vendor(session.user_id, vendor_id)
    return FavoriteStatus(vendor_id=vendor_id, is_favorite=False)
