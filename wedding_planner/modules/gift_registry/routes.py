from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.gift_registry.schemas import (
    GiftItemCreate, GiftItemUpdate, GiftItemResponse, GiftPurchase, GiftRegistryStats
)
from wedding_planner.modules.gift_registry.service import GiftRegistryService
from wedding_planner.core.dependencies import get_session, check_event_access, check_record_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List

router = APIRouter(prefix="/gift-registry", tags=["gift-registry"])


def get_gift_registry_service(supabase: Client = Depends(get_supabase)) -> GiftRegistryService:
    return GiftRegistryService(supabase)


@router.get("/event/{event_id}", response_model=List[GiftItemResponse])
async def list_gift_items(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_event_gift_registry(event_id)


@router.get("/event/{event_id}/public", response_model=List[GiftItemResponse])
async def list_public_gift_items(
    event_id: str,
    service: GiftRegistryService = Depends(get_gift_registry_service)
):
    """Registry of a public event, readable without signing in"""
    return service.get_public_gift_registry(event_id)


@router.get("/event/{event_id}/stats", response_model=GiftRegistryStats)
async def get_gift_registry_stats(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(event_id, session, supabase)
    return service.get_gift_registry_stats(event_id)


@router.post("", response_model=GiftItemResponse, status_code=201)
async def create_gift_item(
    item_data: GiftItemCreate,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    check_event_access(item_data.event_id, session, supabase)
    return service.create_gift_item(item_data)


@router.put("/{item_id}", response_model=GiftItemResponse)
async def update_gift_item(
    item_id: str,
    item_data: GiftItemUpdate,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("gift_registry_items", item_id, session, supabase)
    return service.update_gift_item(item_id, item_data)


@router.post("/{item_id}/purchase", response_model=GiftItemResponse)
async def purchase_gift_item(
    item_id: str,
    purchase: GiftPurchase,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    """Record a purchase; guests may buy from public registries"""
    check_record_event_access("gift_registry_items", item_id, session, supabase, allow_public=True)
    return service.mark_gift_purchased(item_id, purchase.count)


@router.delete("/{item_id}", status_code=204)
async def delete_gift_item(
    item_id: str,
    session: SessionContext = Depends(get_session),
    service: GiftRegistryService = Depends(get_gift_registry_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("gift_registry_items", item_id, session, supabase)
    service.delete_gift_item(item_id)
    return None
