# Supabase table: favorite_vendors
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, not null, on delete cascade)
- vendor_id: uuid (foreign key to vendors.id, not null, on delete cascade)
- created_at: timestamp (default: now())

Unique constraint: (user_id, vendor_id)
"""
