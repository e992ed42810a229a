from typing import Any, Dict, Optional

from fastapi import HTTPException

from wedding_planner.modules.users.schemas import UserProfile
from wedding_planner.modules.users.service import UserService


def ensure_authenticated(user_id: Optional[str]) -> str:
    """Ownership-scoped operations need an identity"""
    if not user_id:
        raise HTTPException(status_code=401, detail="User not authenticated")
    return user_id


class SessionContext:
    """Identity of the caller for one request: auth user, token and lazily ensured profile."""

    def __init__(self, user: Dict[str, Any], access_token: str, user_service: UserService):
        self.user = user
        self.access_token = access_token
        self._user_service = user_service
        self._profile: Optional[UserProfile] = None

    @property
    def user_id(self) -> str:
        return self.user["id"]

    @property
    def email(self) -> Optional[str]:
        return self.user.get("email")

    @property
    def metadata(self) -> Dict[str, Any]:
        return self.user.get("user_metadata") or {}

    @property
    def profile(self) -> UserProfile:
        if self._profile is None:
            self._profile = self._user_service.ensure_user_profile(self.user)
        return self._profile

    @property
    def role(self) -> str:
        return self.profile.role

    @property
    def is_admin(self) -> bool:
        # Fallback profiles are never approved, so they cannot act as admin
        return self.role == "admin" and bool(self.profile.is_approved)
