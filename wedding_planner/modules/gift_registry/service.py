from supabase import Client
from wedding_planner.core.math_utils import percentage
from wedding_planner.modules.gift_registry.schemas import (
    GiftItemCreate, GiftItemUpdate, GiftItemResponse, GiftRegistryStats
)
from typing import Any, Dict, Iterable, List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def compute_gift_registry_stats(items: Iterable[Dict[str, Any]]) -> GiftRegistryStats:
    items = list(items)
    total_value = sum((item.get("price") or 0) * (item.get("quantity") or 0) for item in items)
    purchased_value = sum((item.get("price") or 0) * (item.get("purchased") or 0) for item in items)
    total_quantity = sum(item.get("quantity") or 0 for item in items)
    purchased_quantity = sum(item.get("purchased") or 0 for item in items)
    return GiftRegistryStats(
        totalItems=len(items),
        totalValue=total_value,
        purchasedValue=purchased_value,
        remainingValue=total_value - purchased_value,
        totalQuantity=total_quantity,
        purchasedQuantity=purchased_quantity,
        remainingQuantity=total_quantity - purchased_quantity,
        completionRate=percentage(purchased_value, total_value)
    )


class GiftRegistryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_event_gift_registry(self, event_id: str) -> List[GiftItemResponse]:
        """Registry items of one event ordered by category"""
        try:
            result = self.supabase.table("gift_registry_items")\
                .select("*")\
                .eq("event_id", event_id)\
                .order("category", desc=False)\
                .execute()
            return [GiftItemResponse(**item) for item in result.data]
        except Exception as e:
            logger.error(f"Error fetching gift registry items: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_gift_item_by_id(self, item_id: str) -> GiftItemResponse:
        try:
            result = self.supabase.table("gift_registry_items")\
                .select("*")\
                .eq("id", item_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Gift item not found")

            return GiftItemResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_gift_item(self, item_data: GiftItemCreate) -> GiftItemResponse:
        try:
            result = self.supabase.table("gift_registry_items").insert(item_data.model_dump()).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create gift item")

            return GiftItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating gift item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_gift_item(self, item_id: str, item_data: GiftItemUpdate) -> GiftItemResponse:
        try:
            update_data = item_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_gift_item_by_id(item_id)

            result = self.supabase.table("gift_registry_items")\
                .update(update_data)\
                .eq("id", item_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Gift item not found")

            return GiftItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating gift item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_gift_item(self, item_id: str) -> bool:
        try:
            self.supabase.table("gift_registry_items")\
                .delete()\
                .eq("id", item_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting gift item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def mark_gift_purchased(self, item_id: str, count: int = 1) -> GiftItemResponse:
        """Increment the purchased count. Not capped at quantity; the schema does not enforce it either."""
        item = self.get_gift_item_by_id(item_id)
        new_purchased = item.purchased + count
        if new_purchased > item.quantity:
            logger.warning(f"Gift item {item_id} purchased {new_purchased} of {item.quantity}")
        return self.update_gift_item(item_id, GiftItemUpdate(purchased=new_purchased))

    def get_gift_registry_stats(self, event_id: str) -> GiftRegistryStats:
        try:
            result = self.supabase.table("gift_registry_items")\
                .select("price, quantity, purchased")\
                .eq("event_id", event_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching gift registry stats: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return compute_gift_registry_stats(result.data or [])

    def get_public_gift_registry(self, event_id: str) -> List[GiftItemResponse]:
        """Registry of a public event, for guests"""
        try:
            result = self.supabase.table("events")\
                .select("is_public")\
                .eq("id", event_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Error checking event visibility: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Event not found")
        if not result.data.get("is_public"):
            raise HTTPException(status_code=403, detail="This gift registry is private")

        return self.get_event_gift_registry(event_id)
