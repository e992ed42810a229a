# Supabase table: guests
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null, on delete cascade)
- name: text (not null)
- email: text (nullable)
- phone: text (nullable)
- rsvp_status: text (default: 'pending') - pending | attending | declined
- plus_one: boolean (default: false)
- plus_one_name: text (nullable)
- dietary_restrictions: text (nullable)
- table_number: integer (nullable) - null until seated; the only guest-to-table link
- notes: text (nullable)
- invited_at: timestamp (default: now())
- responded_at: timestamp (nullable) - set on RSVP
"""

CSV_COLUMNS = ("name", "email", "phone", "plus_one", "dietary_restrictions", "notes")
