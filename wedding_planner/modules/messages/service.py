from supabase import Client
from wedding_planner.core.filters import ensure_filter_id
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.messages.models import GENERAL_CONVERSATION
from wedding_planner.modules.messages.schemas import MessageCreate, MessageResponse, Conversation
from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime, timezone
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

PARTICIPANT_COLUMNS = "sender:users!messages_sender_id_fkey(name, email), receiver:users!messages_receiver_id_fkey(name, email)"


def _sent_at(message: Dict[str, Any]) -> datetime:
    value = message.get("created_at")
    if not value:
        return datetime.min.replace(tzinfo=timezone.utc)
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def group_conversations(messages: Iterable[Dict[str, Any]], user_id: str) -> List[Conversation]:
    """
    Group a user's messages into conversations.

    A conversation is keyed by the other participant and the event (or
    "general" when the message has none). Unread counts only include
    messages received by user_id. Conversations are sorted by their latest
    message, newest first.
    """
    grouped: Dict[str, Dict[str, Any]] = {}

    for message in messages:
        outgoing = message.get("sender_id") == user_id
        other_id = message.get("receiver_id") if outgoing else message.get("sender_id")
        key = f"{other_id}-{message.get('event_id') or GENERAL_CONVERSATION}"

        conversation = grouped.get(key)
        if conversation is None:
            conversation = grouped[key] = {
                "otherUserId": other_id,
                "otherUser": message.get("receiver") if outgoing else message.get("sender"),
                "eventId": message.get("event_id"),
                "event": message.get("events"),
                "lastMessage": message,
                "unreadCount": 0,
                "messages": [],
            }

        conversation["messages"].append(message)
        if message.get("receiver_id") == user_id and not message.get("is_read"):
            conversation["unreadCount"] += 1
        if _sent_at(message) > _sent_at(conversation["lastMessage"]):
            conversation["lastMessage"] = message

    ordered = sorted(grouped.values(), key=lambda c: _sent_at(c["lastMessage"]), reverse=True)
    return [Conversation(**conversation) for conversation in ordered]


class MessageService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_conversation(
        self,
        user_id: Optional[str],
        other_user_id: str,
        event_id: Optional[str] = None
    ) -> List[MessageResponse]:
        """Messages exchanged between two users, oldest first"""
        user_id = ensure_authenticated(user_id)
        other_user_id = ensure_filter_id(other_user_id, "user id")
        try:
            query = self.supabase.table("messages")\
                .select(f"*, {PARTICIPANT_COLUMNS}")\
                .or_(
                    f"and(sender_id.eq.{user_id},receiver_id.eq.{other_user_id}),"
                    f"and(sender_id.eq.{other_user_id},receiver_id.eq.{user_id})"
                )

            if event_id:
                query = query.eq("event_id", event_id)

            result = query.order("created_at", desc=False).execute()
            return [MessageResponse(**message) for message in result.data]
        except Exception as e:
            logger.error(f"Error fetching conversation: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_conversations(self, user_id: Optional[str]) -> List[Conversation]:
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("messages")\
                .select(f"*, {PARTICIPANT_COLUMNS}, events(title, date)")\
                .or_(f"sender_id.eq.{user_id},receiver_id.eq.{user_id}")\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching conversations: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return group_conversations(result.data or [], user_id)

    def send_message(self, message_data: MessageCreate, user_id: Optional[str]) -> MessageResponse:
        user_id = ensure_authenticated(user_id)
        if message_data.receiver_id == user_id:
            raise HTTPException(status_code=400, detail="Cannot send a message to yourself")
        try:
            data = message_data.model_dump()
            data["sender_id"] = user_id

            result = self.supabase.table("messages").insert(data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to send message")

            return MessageResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error sending message: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def mark_messages_as_read(
        self,
        user_id: Optional[str],
        sender_id: str,
        event_id: Optional[str] = None
    ) -> bool:
        """Mark everything sender_id sent to user_id as read, optionally within one event"""
        user_id = ensure_authenticated(user_id)
        try:
            query = self.supabase.table("messages")\
                .update({"is_read": True})\
                .eq("receiver_id", user_id)\
                .eq("sender_id", sender_id)\
                .eq("is_read", False)

            if event_id:
                query = query.eq("event_id", event_id)

            query.execute()
            return True
        except Exception as e:
            logger.error(f"Error marking messages as read: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_unread_message_count(self, user_id: Optional[str]) -> int:
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("messages")\
                .select("id", count="exact")\
                .eq("receiver_id", user_id)\
                .eq("is_read", False)\
                .execute()
            return result.count or 0
        except Exception as e:
            logger.error(f"Error fetching unread count: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_message_by_id(self, message_id: str) -> MessageResponse:
        try:
            result = self.supabase.table("messages")\
                .select("*")\
                .eq("id", message_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Message not found")

            return MessageResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_message(self, message_id: str) -> bool:
        try:
            self.supabase.table("messages")\
                .delete()\
                .eq("id", message_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting message: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def search_messages(
        self,
        user_id: Optional[str],
        search_term: str,
        event_id: Optional[str] = None
    ) -> List[MessageResponse]:
        """The user's sent and received messages containing search_term, newest first"""
        user_id = ensure_authenticated(user_id)
        try:
            query = self.supabase.table("messages")\
                .select(f"*, {PARTICIPANT_COLUMNS}, events(title)")\
                .or_(f"sender_id.eq.{user_id},receiver_id.eq.{user_id}")\
                .ilike("content", f"%{search_term}%")

            if event_id:
                query = query.eq("event_id", event_id)

            result = query.order("created_at", desc=True).execute()
            return [MessageResponse(**message) for message in result.data]
        except Exception as e:
            logger.error(f"Error searching messages: {e}")
            raise HTTPException(status_code=500, detail=str(e))
