from fastapi import APIRouter, Depends, HTTPException, status
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.messages.schemas import (
    MessageCreate, MessageResponse, Conversation, MarkReadRequest, UnreadCount
)
from wedding_planner.modules.messages.service import MessageService
from wedding_planner.core.dependencies import get_session
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List, Optional
import uuid

router = APIRouter(prefix="/messages", tags=["messages"])


def get_message_service(supabase: Client = Depends(get_supabase)) -> MessageService:
    return MessageService(supabase)


@router.get("/conversations", response_model=List[Conversation])
async def list_conversations(
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    """The caller's conversations, most recently active first"""
    return service.get_user_conversations(session.user_id)


@router.get("/conversations/{other_user_id}", response_model=List[MessageResponse])
async def get_conversation(
    other_user_id: uuid.UUID,
    event_id: Optional[str] = None,
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    return service.get_conversation(session.user_id, str(other_user_id), event_id)


@router.get("/unread-count", response_model=UnreadCount)
async def get_unread_count(
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    return UnreadCount(count=service.get_unread_message_count(session.user_id))


@router.get("/search", response_model=List[MessageResponse])
async def search_messages(
    q: str,
    event_id: Optional[str] = None,
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    return service.search_messages(session.user_id, q, event_id)


@router.post("", response_model=MessageResponse, status_code=201)
async def send_message(
    message_data: MessageCreate,
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    return service.send_message(message_data, session.user_id)


@router.post("/read")
async def mark_messages_as_read(
    request: MarkReadRequest,
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    """Mark messages from one sender as read"""
    service.mark_messages_as_read(session.user_id, request.sender_id, request.event_id)
    return {"success": True}


@router.delete("/{message_id}", status_code=204)
async def delete_message(
    message_id: str,
    session: SessionContext = Depends(get_session),
    service: MessageService = Depends(get_message_service)
):
    message = service.get_message_by_id(message_id)
    if message.sender_id != session.user_id and not session.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You can only delete messages you sent")
    service.delete_message(message_id)
    return None
