# Supabase table: events
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- date: date (not null)
- venue: text (not null)
- location: text (not null)
- style: text (not null)
- description: text (nullable)
- couple_names: jsonb (array of text)
- photos: jsonb (array of text)
- guest_count: integer (default: 0)
- budget: numeric (default: 0)
- spent: numeric (default: 0) - tracked independently of budget_items
- progress: integer (nullable) - cached percentage of completed tasks
- is_public: boolean (default: false)
- status: text (default: 'planning') - planning | confirmed | completed | cancelled
- created_by: uuid (foreign key to users.id, not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Has many: tasks, guests, budget_items, gift_registry_items, seating_plans, bookings.
"""
