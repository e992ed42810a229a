# Supabase table: seating_plans
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null, on delete cascade)
- name: text (not null)
- layout: text (default: 'round') - round | rectangular | mixed
- tables: jsonb - array of {number, seats, shape, position: {x, y}}
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Tables are denormalized JSON, not a separate table. A guest is seated by
guests.table_number, never by membership inside this JSON.
"""
