from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

UserRole = Literal["admin", "vendor", "couple", "guest", "general"]


class UserProfile(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    role: UserRole = "general"
    avatar: Optional[str] = None
    phone: Optional[str] = None
    is_approved: Optional[bool] = False
    privacy_accepted: Optional[bool] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserProfileCreate(BaseModel):
    name: Optional[str] = None
    role: Optional[UserRole] = None


class UserUpdate(BaseModel):
    name: Optional[str] = None
    avatar: Optional[str] = None
    phone: Optional[str] = None


class ApprovalRequest(BaseModel):
    is_approved: bool = True
