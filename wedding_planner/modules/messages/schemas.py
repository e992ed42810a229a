from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

MessageType = Literal["text", "image", "file"]


class MessageCreate(BaseModel):
    receiver_id: str
    event_id: Optional[str] = None
    content: str = Field(min_length=1)
    type: MessageType = "text"


class MessageResponse(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    event_id: Optional[str] = None
    content: str
    type: Optional[str] = "text"
    is_read: Optional[bool] = False
    created_at: Optional[datetime] = None
    sender: Optional[dict] = None
    receiver: Optional[dict] = None
    events: Optional[dict] = None

    class Config:
        from_attributes = True


class Conversation(BaseModel):
    otherUserId: str
    otherUser: Optional[dict] = None
    eventId: Optional[str] = None
    event: Optional[dict] = None
    lastMessage: MessageResponse
    unreadCount: int = 0
    messages: List[MessageResponse] = []


class MarkReadRequest(BaseModel):
    sender_id: str
    event_id: Optional[str] = None


class UnreadCount(BaseModel):
    count: int
