from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase, get_service_supabase
from wedding_planner.modules.dashboards.schemas import (
    AdminDashboard, CoupleDashboard, GeneralDashboard, GuestDashboard, VendorDashboard
)
from wedding_planner.modules.dashboards.service import DashboardService
from wedding_planner.core.dependencies import get_optional_session, get_session, require_role, require_admin
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import Optional, Union

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

AnyDashboard = Union[CoupleDashboard, VendorDashboard, GuestDashboard, AdminDashboard, GeneralDashboard]


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("", response_model=AnyDashboard)
async def get_my_dashboard(
    session: Optional[SessionContext] = Depends(get_optional_session),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Dashboard for the caller's role; anonymous callers get the general one"""
    if session is None:
        return await service.get_general_dashboard(None)
    if session.is_admin:
        return await DashboardService(get_service_supabase()).get_admin_dashboard(session)
    if session.role == "couple":
        return await service.get_couple_dashboard(session)
    if session.role == "vendor":
        return await service.get_vendor_dashboard(session)
    if session.role == "guest":
        return await service.get_guest_dashboard(session)
    return await service.get_general_dashboard(session)


@router.get("/couple", response_model=CoupleDashboard)
async def get_couple_dashboard(
    session: SessionContext = Depends(require_role("couple")),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_couple_dashboard(session)


@router.get("/vendor", response_model=VendorDashboard)
async def get_vendor_dashboard(
    session: SessionContext = Depends(require_role("vendor")),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_vendor_dashboard(session)


@router.get("/guest", response_model=GuestDashboard)
async def get_guest_dashboard(
    session: SessionContext = Depends(get_session),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_guest_dashboard(session)


@router.get("/general", response_model=GeneralDashboard)
async def get_general_dashboard(
    session: Optional[SessionContext] = Depends(get_optional_session),
    service: DashboardService = Depends(get_dashboard_service)
):
    return await service.get_general_dashboard(session)


@router.get("/admin", response_model=AdminDashboard)
async def get_admin_dashboard(
    session: SessionContext = Depends(require_admin),
    supabase: Client = Depends(get_service_supabase)
):
    return await DashboardService(supabase).get_admin_dashboard(session)
