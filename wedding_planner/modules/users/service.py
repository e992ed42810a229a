from supabase import Client
from wedding_planner.modules.users.schemas import UserProfile, UserUpdate
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def _display_name(user: Dict[str, Any], name: Optional[str] = None) -> str:
    """Pick a display name: explicit name, metadata name, email local part, then 'User'."""
    if name:
        return name
    metadata = user.get("user_metadata") or {}
    if metadata.get("name"):
        return metadata["name"]
    email = user.get("email") or ""
    local_part = email.split("@")[0]
    return local_part or "User"


def fallback_profile(user: Dict[str, Any], name: Optional[str] = None, role: str = "general") -> UserProfile:
    """Build an in-memory profile that is never persisted."""
    return UserProfile(
        id=user["id"],
        name=_display_name(user, name),
        email=user.get("email"),
        role=role,
        avatar=None,
        phone=None,
        created_at=datetime.now(timezone.utc),
        is_approved=False,
        privacy_accepted=True
    )


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_current_user_profile(self, user_id: Optional[str]) -> Optional[UserProfile]:
        """Return the profile row for the signed-in identity, or None. Lookup errors are logged, not raised."""
        if not user_id:
            logger.info("No authenticated user found")
            return None
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                logger.info(f"User profile {user_id} not found, may need to be created")
                return None

            return UserProfile(**result.data)
        except Exception as e:
            logger.error(f"Error fetching user profile: {e}")
            return None

    def create_user_profile(self, user_id: str, name: str, email: str, role: str) -> UserProfile:
        """Create the profile row if absent; returns the existing row otherwise"""
        existing = self.get_current_user_profile(user_id)
        if existing:
            logger.info(f"Profile {user_id} already exists, returning existing profile")
            return existing

        try:
            result = self.supabase.table("users").insert({
                "id": user_id,
                "name": name,
                "email": email,
                "role": role,
                "privacy_accepted": True,
                "is_approved": role == "admin"
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create user profile")

            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating user profile: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def ensure_user_profile(
        self,
        user: Optional[Dict[str, Any]],
        name: Optional[str] = None,
        role: Optional[str] = None
    ) -> Optional[UserProfile]:
        """Fetch or create the profile. Any failure yields a non-persisted fallback so callers never get stuck."""
        if not user:
            return None
        try:
            profile = self.get_current_user_profile(user["id"])
            if profile:
                return profile

            metadata = user.get("user_metadata") or {}
            profile_name = _display_name(user, name)
            profile_role = role or metadata.get("role") or "general"
            try:
                return self.create_user_profile(user["id"], profile_name, user.get("email"), profile_role)
            except Exception as e:
                logger.error(f"Failed to create profile, using fallback: {e}")
                return fallback_profile(user, profile_name, profile_role)
        except Exception as e:
            logger.error(f"Error ensuring user profile: {e}")
            return fallback_profile(user)

    def get_user_by_id(self, user_id: str) -> UserProfile:
        """Get user profile by ID"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="User not found")

            return UserProfile(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_user_profile(self, user_id: str, user_data: UserUpdate) -> UserProfile:
        """Update user profile (role is fixed at creation and never patched)"""
        try:
            update_data = user_data.model_dump(exclude_none=True)
            if not update_data:
                return self.get_user_by_id(user_id)

            result = self.supabase.table("users")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="User not found")

            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_users(self, role: Optional[str] = None, limit: int = 50, offset: int = 0) -> List[UserProfile]:
        """List user profiles, newest first"""
        try:
            query = self.supabase.table("users").select("*")
            if role:
                query = query.eq("role", role)
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [UserProfile(**user) for user in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_pending_approvals(self) -> List[UserProfile]:
        """Users awaiting admin approval"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("is_approved", False)\
                .order("created_at", desc=True)\
                .execute()
            return [UserProfile(**user) for user in result.data]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def set_approval(self, user_id: str, is_approved: bool) -> UserProfile:
        """Approve or reject a user"""
        try:
            result = self.supabase.table("users")\
                .update({"is_approved": is_approved})\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="User not found")

            logger.info(f"User {user_id} approval set to {is_approved}")
            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
