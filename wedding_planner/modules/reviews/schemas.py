from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ReviewCreate(BaseModel):
    vendor_id: str
    event_id: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    id: str
    vendor_id: str
    user_id: str
    event_id: Optional[str] = None
    rating: int
    comment: Optional[str] = None
    is_verified: Optional[bool] = False
    created_at: Optional[datetime] = None
    users: Optional[dict] = None  # Reviewer name

    class Config:
        from_attributes = True


class ReviewVerification(BaseModel):
    is_verified: bool
