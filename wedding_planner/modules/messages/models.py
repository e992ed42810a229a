# Supabase table: messages
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- sender_id: uuid (foreign key to users.id, constraint messages_sender_id_fkey)
- receiver_id: uuid (foreign key to users.id, constraint messages_receiver_id_fkey)
- event_id: uuid (foreign key to events.id, nullable)
- content: text (not null)
- type: text (default: 'text') - text | image | file
- is_read: boolean (default: false)
- created_at: timestamp (default: now())

A conversation is not stored: it is the set of messages between two users
for one event, or with no event ("general").
"""

GENERAL_CONVERSATION = "general"
