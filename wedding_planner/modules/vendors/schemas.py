from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, List, Optional
from datetime import datetime


class VendorCreate(BaseModel):
    name: str
    category: str
    email: EmailStr
    phone: str
    website: Optional[str] = None
    starting_price: float = Field(default=0, ge=0)
    location: str
    description: str
    services: List[str] = []
    photos: List[str] = []
    availability: List[str] = []
    social_media: Optional[Dict[str, Any]] = None


class VendorUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    starting_price: Optional[float] = Field(default=None, ge=0)
    location: Optional[str] = None
    description: Optional[str] = None
    services: Optional[List[str]] = None
    photos: Optional[List[str]] = None
    availability: Optional[List[str]] = None
    social_media: Optional[Dict[str, Any]] = None


class VendorResponse(BaseModel):
    id: str
    name: str
    category: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    rating: float = 0
    review_count: int = 0
    starting_price: float = 0
    location: Optional[str] = None
    description: Optional[str] = None
    services: List[Any] = []
    photos: List[Any] = []
    availability: List[Any] = []
    is_approved: Optional[bool] = False
    is_featured: Optional[bool] = False
    social_media: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VendorApprovalRequest(BaseModel):
    is_approved: bool
    is_featured: Optional[bool] = None
