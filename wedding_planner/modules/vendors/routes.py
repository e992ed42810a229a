from fastapi import APIRouter, Depends, HTTPException
from wedding_planner.database.supabase_client import get_supabase, get_service_supabase
from wedding_planner.modules.vendors.models import VENDOR_CATEGORIES
from wedding_planner.modules.vendors.schemas import (
    VendorCreate, VendorUpdate, VendorResponse, VendorApprovalRequest
)
from wedding_planner.modules.vendors.service import VendorService
from wedding_planner.core.dependencies import get_session, require_role, require_admin, check_vendor_owner
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/vendors", tags=["vendors"])


def get_vendor_service(supabase: Client = Depends(get_supabase)) -> VendorService:
    return VendorService(supabase)


@router.get("", response_model=List[VendorResponse])
async def list_vendors(
    q: Optional[str] = None,
    category: Optional[str] = None,
    location: Optional[str] = None,
    service: VendorService = Depends(get_vendor_service)
):
    """Approved vendors, optionally filtered by text, category and location"""
    if q or category or location:
        return service.search_vendors(q, category, location)
    return service.get_approved_vendors()


@router.get("/categories", response_model=List[str])
async def list_categories():
    return VENDOR_CATEGORIES


@router.get("/featured", response_model=List[VendorResponse])
async def list_featured_vendors(
    limit: Optional[int] = None,
    service: VendorService = Depends(get_vendor_service)
):
    return service.get_featured_vendors(limit)


@router.get("/me", response_model=Optional[VendorResponse])
async def get_my_vendor_profile(
    session: SessionContext = Depends(get_session),
    service: VendorService = Depends(get_vendor_service)
):
    """The caller's vendor profile, null if none exists yet"""
    return service.get_current_vendor_profile(session.user_id)


@router.get("/pending", response_model=List[VendorResponse])
async def list_pending_vendors(
    session: SessionContext = Depends(require_admin),
    supabase: Client = Depends(get_service_supabase)
):
    """Vendor profiles awaiting approval (admin only)"""
    return VendorService(supabase).list_pending_vendors()


@router.get("/category/{category}", response_model=List[VendorResponse])
async def list_vendors_by_category(
    category: str,
    service: VendorService = Depends(get_vendor_service)
):
    return service.get_vendors_by_category(category)


@router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(
    vendor_id: str,
    service: VendorService = Depends(get_vendor_service)
):
    return service.get_vendor_by_id(vendor_id)


@router.post("", response_model=VendorResponse, status_code=201)
async def create_vendor_profile(
    vendor_data: VendorCreate,
    session: SessionContext = Depends(require_role("vendor")),
    service: VendorService = Depends(get_vendor_service)
):
    """Create the caller's vendor profile"""
    if service.get_current_vendor_profile(session.user_id):
        raise HTTPException(status_code=409, detail="Vendor profile already exists")
    return service.create_vendor_profile(vendor_data, session.user_id)


@router.put("/{vendor_id}", response_model=VendorResponse)
async def update_vendor_profile(
    vendor_id: str,
    vendor_data: VendorUpdate,
    session: SessionContext = Depends(get_session),
    service: VendorService = Depends(get_vendor_service)
):
    check_vendor_owner(vendor_id, session)
    return service.update_vendor_profile(vendor_id, vendor_data)


@router.put("/{vendor_id}/approval", response_model=VendorResponse)
async def set_vendor_approval(
    vendor_id: str,
    approval: VendorApprovalRequest,
    session: SessionContext = Depends(require_admin),
    supabase: Client = Depends(get_service_supabase)
):
    """Approve, reject or feature a vendor (admin only)"""
    return VendorService(supabase).set_vendor_approval(vendor_id, approval.is_approved, approval.is_featured)


@router.delete("/{vendor_id}", status_code=204)
async def delete_vendor_profile(
    vendor_id: str,
    session: SessionContext = Depends(get_session),
    service: VendorService = Depends(get_vendor_service)
):
    check_vendor_owner(vendor_id, session)
    service.delete_vendor_profile(vendor_id)
    return None
