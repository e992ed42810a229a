from pydantic import BaseModel, Field
from typing import List, Literal, Optional
import datetime as dt

EventStatus = Literal["planning", "confirmed", "completed", "cancelled"]


class EventCreate(BaseModel):
    title: str
    date: dt.date
    venue: str
    location: str = ""
    style: str = ""
    description: Optional[str] = None
    couple_names: List[str] = []
    photos: List[str] = []
    guest_count: int = Field(default=0, ge=0)
    budget: float = Field(default=0, ge=0)
    spent: float = Field(default=0, ge=0)
    is_public: bool = False
    status: EventStatus = "planning"


class EventUpdate(BaseModel):
    title: Optional[str] = None
    date: Optional[dt.date] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    style: Optional[str] = None
    description: Optional[str] = None
    couple_names: Optional[List[str]] = None
    photos: Optional[List[str]] = None
    guest_count: Optional[int] = Field(default=None, ge=0)
    budget: Optional[float] = Field(default=None, ge=0)
    spent: Optional[float] = Field(default=None, ge=0)
    is_public: Optional[bool] = None
    status: Optional[EventStatus] = None


class EventResponse(BaseModel):
    id: str
    title: str
    date: dt.date
    venue: str
    location: Optional[str] = None
    style: Optional[str] = None
    description: Optional[str] = None
    couple_names: Optional[List[str]] = None
    photos: Optional[List[str]] = None
    guest_count: Optional[int] = 0
    budget: Optional[float] = 0
    spent: Optional[float] = 0
    progress: Optional[int] = 0
    is_public: Optional[bool] = False
    status: Optional[str] = "planning"
    created_by: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class EventProgressResponse(BaseModel):
    event_id: str
    progress: int
