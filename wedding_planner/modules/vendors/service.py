from supabase import Client
from wedding_planner.config import settings
from wedding_planner.core.filters import quote_filter_value
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.vendors.schemas import VendorCreate, VendorUpdate, VendorResponse
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class VendorService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _list(self, query) -> List[VendorResponse]:
        result = query.order("rating", desc=True).execute()
        return [VendorResponse(**vendor) for vendor in result.data]

    def get_approved_vendors(self) -> List[VendorResponse]:
        """Approved vendors, best rated first"""
        try:
            query = self.supabase.table("vendors")\
                .select("*")\
                .eq("is_approved", True)
            return self._list(query)
        except Exception as e:
            logger.error(f"Error fetching vendors: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_vendors_by_category(self, category: str) -> List[VendorResponse]:
        try:
            query = self.supabase.table("vendors")\
                .select("*")\
                .eq("category", category)\
                .eq("is_approved", True)
            return self._list(query)
        except Exception as e:
            logger.error(f"Error fetching vendors by category: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_vendor_by_id(self, vendor_id: str) -> VendorResponse:
        try:
            result = self.supabase.table("vendors")\
                .select("*")\
                .eq("id", vendor_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Vendor not found")

            return VendorResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_current_vendor_profile(self, user_id: Optional[str]) -> Optional[VendorResponse]:
        """The caller's vendor profile, or None if they have not created one"""
        if not user_id:
            return None
        try:
            result = self.supabase.table("vendors")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching vendor profile: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        if not result or not result.data:
            return None
        return VendorResponse(**result.data)

    def create_vendor_profile(self, vendor_data: VendorCreate, user_id: Optional[str]) -> VendorResponse:
        """Create the vendor profile keyed by the owner's auth id; approval is left to an admin"""
        user_id = ensure_authenticated(user_id)
        try:
            data = vendor_data.model_dump(mode="json")
            data["id"] = user_id

            result = self.supabase.table("vendors").insert(data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create vendor profile")

            logger.info(f"Vendor profile created for user {user_id}")
            return VendorResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating vendor profile: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_vendor_profile(self, vendor_id: str, vendor_data: VendorUpdate) -> VendorResponse:
        try:
            update_data = vendor_data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                return self.get_vendor_by_id(vendor_id)

            return self._update(vendor_id, update_data)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating vendor profile: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _update(self, vendor_id: str, update_data: Dict[str, Any]) -> VendorResponse:
        result = self.supabase.table("vendors")\
            .update(update_data)\
            .eq("id", vendor_id)\
            .execute()

        if not result.data:
            raise HTTPException(status_code=404, detail="Vendor not found")

        return VendorResponse(**result.data[0])

    def delete_vendor_profile(self, vendor_id: str) -> bool:
        try:
            self.supabase.table("vendors")\
                .delete()\
                .eq("id", vendor_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting vendor profile: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def search_vendors(
        self,
        search_term: Optional[str] = None,
        category: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[VendorResponse]:
        """Approved vendors matching name/description, category ("all" disables it) and location"""
        try:
            query = self.supabase.table("vendors")\
                .select("*")\
                .eq("is_approved", True)

            if search_term:
                pattern = quote_filter_value(f"%{search_term}%")
                query = query.or_(f"name.ilike.{pattern},description.ilike.{pattern}")
            if category and category != "all":
                query = query.eq("category", category)
            if location:
                query = query.ilike("location", f"%{location}%")

            return self._list(query)
        except Exception as e:
            logger.error(f"Error searching vendors: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_featured_vendors(self, limit: Optional[int] = None) -> List[VendorResponse]:
        try:
            result = self.supabase.table("vendors")\
                .select("*")\
                .eq("is_approved", True)\
                .eq("is_featured", True)\
                .order("rating", desc=True)\
                .limit(limit or settings.featured_vendor_limit)\
                .execute()
            return [VendorResponse(**vendor) for vendor in result.data]
        except Exception as e:
            logger.error(f"Error fetching featured vendors: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_pending_vendors(self) -> List[VendorResponse]:
        """Vendor profiles awaiting admin approval, oldest first"""
        try:
            result = self.supabase.table("vendors")\
                .select("*")\
                .eq("is_approved", False)\
                .order("created_at", desc=False)\
                .execute()
            return [VendorResponse(**vendor) for vendor in result.data]
        except Exception as e:
            logger.error(f"Error fetching pending vendors: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def set_vendor_approval(
        self,
        vendor_id: str,
        is_approved: bool,
        is_featured: Optional[bool] = None
    ) -> VendorResponse:
        try:
            update_data: Dict[str, Any] = {"is_approved": is_approved}
            if is_featured is not None:
                update_data["is_featured"] = is_featured

            vendor = self._update(vendor_id, update_data)
            logger.info(f"Vendor {vendor_id} approval set to {is_approved}")
            return vendor
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
