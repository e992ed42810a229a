# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, references auth.users.id)
- name: text (not null)
- email: text (not null)
- role: text (not null) - admin | vendor | couple | guest | general, fixed at creation
- avatar: text (nullable)
- phone: text (nullable)
- is_approved: boolean (default: false) - true on insert only for admins
- privacy_accepted: boolean (default: false)
- created_at: timestamp (default: now())

One row per auth identity. Referenced by events.created_by, vendors.id and bookings.couple_id.
"""

ROLES = ("admin", "vendor", "couple", "guest", "general")
