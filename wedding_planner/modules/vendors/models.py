# Supabase table: vendors
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, equals the owning user's auth id)
- name: text (not null)
- category: text (not null)
- email: text (not null)
- phone: text (not null)
- website: text (nullable)
- rating: numeric (default: 0) - mean of verified reviews, one decimal
- review_count: integer (default: 0)
- starting_price: numeric (default: 0)
- location: text (not null)
- description: text (not null)
- services: jsonb (default: [])
- photos: jsonb (default: [])
- availability: jsonb (default: [])
- is_approved: boolean (default: false)
- is_featured: boolean (default: false)
- social_media: jsonb (nullable)
- created_at: timestamp (default: now())
"""

VENDOR_CATEGORIES = [
    "venue",
    "photography",
    "catering",
    "flowers",
    "music",
    "decoration",
    "attire",
    "transportation",
    "other",
]
