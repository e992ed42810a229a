import datetime as dt
from pydantic import BaseModel, Field
from typing import Literal, Optional

BookingStatus = Literal["inquiry", "pending", "confirmed", "completed", "cancelled"]


class BookingCreate(BaseModel):
    event_id: Optional[str] = None
    vendor_id: str
    service: str
    date: dt.date
    time: Optional[str] = None
    duration: Optional[str] = None
    amount: float = Field(default=0, ge=0)
    status: BookingStatus = "inquiry"
    notes: Optional[str] = None


class BookingUpdate(BaseModel):
    service: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    duration: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    id: str
    event_id: Optional[str] = None
    vendor_id: str
    couple_id: Optional[str] = None
    service: str
    date: Optional[dt.date] = None
    time: Optional[str] = None
    duration: Optional[str] = None
    amount: float = 0
    status: str = "inquiry"
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    # Embedded rows from joined listings
    vendors: Optional[dict] = None
    events: Optional[dict] = None
    users: Optional[dict] = None

    class Config:
        from_attributes = True
