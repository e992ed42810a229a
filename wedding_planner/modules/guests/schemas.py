from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

RSVPStatus = Literal["pending", "attending", "declined"]


class GuestCreate(BaseModel):
    event_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    rsvp_status: RSVPStatus = "pending"
    plus_one: bool = False
    plus_one_name: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    table_number: Optional[int] = Field(default=None, ge=1)
    notes: Optional[str] = None


class GuestUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    rsvp_status: Optional[RSVPStatus] = None
    plus_one: Optional[bool] = None
    plus_one_name: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    table_number: Optional[int] = Field(default=None, ge=1)
    notes: Optional[str] = None


class GuestResponse(BaseModel):
    id: str
    event_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    rsvp_status: str = "pending"
    plus_one: Optional[bool] = False
    plus_one_name: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    table_number: Optional[int] = None
    notes: Optional[str] = None
    invited_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    events: Optional[dict] = None  # Embedded parent event on cross-event listings

    class Config:
        from_attributes = True


class RSVPUpdate(BaseModel):
    status: Literal["attending", "declined"]
    plus_one_name: Optional[str] = None


class GuestImportRow(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    plus_one: bool = False
    dietary_restrictions: Optional[str] = None
    notes: Optional[str] = None


class GuestImportRequest(BaseModel):
    guests: List[GuestImportRow]


class RSVPStats(BaseModel):
    total: int
    attending: int
    declined: int
    pending: int
    plusOnes: int
    totalAttending: int
    responseRate: int
