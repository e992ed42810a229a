# Supabase table: bookings
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, nullable)
- vendor_id: uuid (foreign key to vendors.id, not null)
- couple_id: uuid (foreign key to users.id, constraint bookings_couple_id_fkey)
- service: text (not null)
- date: date (not null)
- time: text (nullable)
- duration: text (nullable)
- amount: numeric (default: 0)
- status: text (default: 'inquiry') - inquiry | pending | confirmed | completed | cancelled
- notes: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Any status may be set from any other; confirming a booking books its
amount into the event budget under the vendor's category.
"""
