# Supabase table: tasks
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null, on delete cascade)
- title: text (not null)
- description: text (nullable)
- due_date: date (nullable)
- assignee: text (nullable)
- completed: boolean (default: false)
- completed_at: timestamp (nullable) - set when the task is marked complete
- priority: text (default: 'medium') - low | medium | high
- category: text (nullable)
- created_at: timestamp (default: now())
"""
