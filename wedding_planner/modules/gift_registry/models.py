# Supabase table: gift_registry_items
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null, on delete cascade)
- name: text (not null)
- description: text (nullable)
- price: numeric (default: 0)
- quantity: integer (default: 1)
- purchased: integer (default: 0) - expected <= quantity, not enforced by the database
- retailer: text (nullable)
- url: text (nullable)
- image: text (nullable)
- category: text (nullable)
"""
