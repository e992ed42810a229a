from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.budget.schemas import (
    BudgetItemCreate, BudgetItemUpdate, BudgetItemResponse, BudgetSummary, BudgetAlert,
    BudgetInitRequest, BookingExpense
)
from wedding_planner.modules.budget.service import BudgetService
from wedding_planner.core.dependencies import get_session, check_event_access, check_record_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List

router = APIRouter(prefix="/budget", tags=["budget"])


def get_budget_service(supabase: Client = Depends(get_supabase)) -> BudgetService:
    return BudgetService(supabase)


@router.get("/event/{event_id}", response_model=List[BudgetItemResponse])
async def list_budget_items(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_event_budget(event_id)


@router.get("/event/{event_id}/summary", response_model=BudgetSummary)
async def get_budget_summary(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_budget_summary(event_id)


@router.get("/event/{event_id}/alerts", response_model=List[BudgetAlert])
async def get_budget_alerts(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_budget_alerts(event_id)


@router.post("/event/{event_id}/initialize", response_model=List[BudgetItemResponse], status_code=201)
async def initialize_default_budget(
    event_id: str,
    init_data: BudgetInitRequest,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    """Create the default category split for a total budget"""
    check_event_access(event_id, session, supabase)
    return service.initialize_default_budget(event_id, init_data.total_budget)


@router.post("/event/{event_id}/expenses", response_model=BudgetItemResponse)
async def record_booking_expense(
    event_id: str,
    expense: BookingExpense,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    """Add a vendor expense to its budget category"""
    check_event_access(event_id, session, supabase)
    return service.update_budget_with_booking(event_id, expense.category, expense.amount, expense.vendor_name)


@router.post("", response_model=BudgetItemResponse, status_code=201)
async def create_budget_item(
    item_data: BudgetItemCreate,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(item_data.event_id, session, supabase)
    return service.create_budget_item(item_data)


@router.put("/{item_id}", response_model=BudgetItemResponse)
async def update_budget_item(
    item_id: str,
    item_data: BudgetItemUpdate,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("budget_items", item_id, session, supabase)
    return service.update_budget_item(item_id, item_data)


@router.delete("/{item_id}", status_code=204)
async def delete_budget_item(
    item_id: str,
    session: SessionContext = Depends(get_session),
    service: BudgetService = Depends(get_budget_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("budget_items", item_id, session, supabase)
    service.delete_budget_item(item_id)
    return None
