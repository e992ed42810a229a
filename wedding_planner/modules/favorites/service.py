from supabase import Client
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.vendors.schemas import VendorResponse
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class FavoriteService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _favorite_ids(self, user_id: str) -> List[str]:
        result = self.supabase.table("favorite_vendors")\
            .select("vendor_id")\
            .eq("user_id", user_id)\
            .execute()
        return [row["vendor_id"] for row in result.data or []]

    def get_favorite_vendors(self, user_id: Optional[str]) -> List[VendorResponse]:
        """The user's favorite vendors that are still approved"""
        user_id = ensure_authenticated(user_id)
        try:
            vendor_ids = self._favorite_ids(user_id)
            if not vendor_ids:
                return []

            result = self.supabase.table("vendors")\
                .select("*")\
                .in_("id", vendor_ids)\
                .eq("is_approved", True)\
                .execute()
            return [VendorResponse(**vendor) for vendor in result.data]
        except Exception as e:
            logger.error(f"Error fetching favorite vendors: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def add_favorite_vendor(self, user_id: Optional[str], vendor_id: str) -> bool:
        """Add a vendor to the user's favorites; adding twice is a no-op"""
        user_id = ensure_authenticated(user_id)
        try:
            if self.is_vendor_favorite(user_id, vendor_id):
                return True

            self.supabase.table("favorite_vendors").insert({
                "user_id": user_id,
                "vendor_id": vendor_id
            }).execute()
            return True
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error adding favorite vendor: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def remove_favorite_vendor(self, user_id: Optional[str], vendor_id: str) -> bool:
        user_id = ensure_authenticated(user_id)
        try:
            self.supabase.table("favorite_vendors")\
                .delete()\
                .eq("user_id", user_id)\
                .eq("vendor_id", vendor_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error removing favorite vendor: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def is_vendor_favorite(self, user_id: Optional[str], vendor_id: str) -> bool:
        """False for anonymous callers"""
        if not user_id:
            return False
        try:
            result = self.supabase.table("favorite_vendors")\
                .select("id")\
                .eq("user_id", user_id)\
                .eq("vendor_id", vendor_id)\
                .limit(1)\
                .execute()
            return bool(result.data)
        except Exception as e:
            logger.error(f"Error checking favorite vendor: {e}")
            raise HTTPException(status_code=500, detail=str(e))
