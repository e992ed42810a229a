import pytest
from fastapi import HTTPException

from wedding_planner.modules.messages.schemas import MessageCreate
from wedding_planner.modules.messages.service import MessageService, group_conversations

ME = "user-1"


def message(message_id, sender, receiver, created_at, event_id=None, is_read=False):
    return {
        "id": message_id,
        "sender_id": sender,
        "receiver_id": receiver,
        "event_id": event_id,
        "content": f"message {message_id}",
        "is_read": is_read,
        "created_at": created_at,
        "sender": {"name": sender},
        "receiver": {"name": receiver},
    }


def test_group_conversations_by_partner_and_event():
    messages = [
        message("m4", "vendor-1", ME, "2025-05-04T10:00:00+00:00", event_id="e1"),
        message("m3", ME, "vendor-1", "2025-05-03T10:00:00+00:00", event_id="e1"),
        message("m2", "vendor-1", ME, "2025-05-02T10:00:00+00:00"),
        message("m1", "vendor-2", ME, "2025-05-05T10:00:00Z", is_read=True),
    ]

    conversations = group_conversations(messages, ME)

    assert [(c.otherUserId, c.eventId) for c in conversations] == [
        ("vendor-2", None), ("vendor-1", "e1"), ("vendor-1", None)
    ]
    event_thread = conversations[1]
    assert event_thread.lastMessage.id == "m4"
    assert event_thread.unreadCount == 1
    assert [m.id for m in event_thread.messages] == ["m4", "m3"]
    assert event_thread.otherUser == {"name": "vendor-1"}
    assert conversations[0].unreadCount == 0


def test_outgoing_messages_are_never_unread():
    conversations = group_conversations(
        [message("m1", ME, "vendor-1", "2025-05-01T10:00:00+00:00")], ME
    )

    assert conversations[0].unreadCount == 0
    assert conversations[0].otherUser == {"name": "vendor-1"}


def test_last_message_is_newest_regardless_of_order():
    conversations = group_conversations([
        message("old", "vendor-1", ME, "2025-05-01T10:00:00+00:00"),
        message("new", "vendor-1", ME, "2025-05-02T10:00:00+00:00"),
    ], ME)

    assert conversations[0].lastMessage.id == "new"
    assert conversations[0].unreadCount == 2


def test_unread_count_uses_exact_count(supabase):
    supabase.respond("messages", [], count=4)

    assert MessageService(supabase).get_unread_message_count(ME) == 4
    query = supabase.queries_for("messages")[0]
    assert query.called("select")[0][2] == {"count": "exact"}


def test_mark_as_read_scopes_to_sender_and_event(supabase):
    MessageService(supabase).mark_messages_as_read(ME, "vendor-1", "e1")

    query = supabase.queries_for("messages", "update")[0]
    assert [call[1] for call in query.called("eq")] == [
        ("receiver_id", ME), ("sender_id", "vendor-1"), ("is_read", False), ("event_id", "e1")
    ]


def test_sending_requires_a_user(supabase):
    with pytest.raises(HTTPException) as exc:
        MessageService(supabase).send_message(MessageCreate(receiver_id="vendor-1", content="hi"), None)

    assert exc.value.status_code == 401


def test_conversation_rejects_filter_syntax_in_user_id(supabase):
    with pytest.raises(HTTPException) as exc:
        MessageService(supabase).get_conversation("user-1", "x),id.not.is.null,and(id.is.null")

    assert exc.value.status_code == 400
    assert supabase.queries == []


def test_conversation_filter_pairs_both_directions(supabase):
    MessageService(supabase).get_conversation("user-1", "vendor-1", "e1")

    query = supabase.queries_for("messages")[0]
    assert query.called("or_")[0][1][0] == (
        "and(sender_id.eq.user-1,receiver_id.eq.vendor-1),"
        "and(sender_id.eq.vendor-1,receiver_id.eq.user-1)"
    )
    assert query.called("eq")[0][1] == ("event_id", "e1")
