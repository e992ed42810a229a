# Supabase table: reviews
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- vendor_id: uuid (foreign key to vendors.id, not null)
- user_id: uuid (foreign key to users.id, not null)
- event_id: uuid (foreign key to events.id, nullable)
- rating: integer (1-5, not null)
- comment: text (nullable)
- is_verified: boolean (default: false)
- created_at: timestamp (default: now())

Only verified reviews are listed and counted towards vendors.rating.
"""
