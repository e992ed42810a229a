# Supabase table: budget_items
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null, on delete cascade)
- category: text (not null)
- budgeted: numeric (default: 0)
- spent: numeric (default: 0)
- remaining: numeric (default: 0) - stored, may drift from budgeted - spent
- color: text (nullable) - UI colour token
- vendors: jsonb (array of vendor names)
- notes: text (nullable)
"""

CATEGORY_COLORS = {
    "Venue": "bg-rose-500",
    "Catering": "bg-blue-500",
    "Photography": "bg-green-500",
    "Videography": "bg-purple-500",
    "Flowers": "bg-pink-500",
    "Music": "bg-yellow-500",
    "Transportation": "bg-indigo-500",
    "Attire": "bg-red-500",
    "Decorations": "bg-orange-500",
    "Stationery": "bg-teal-500",
}
DEFAULT_COLOR = "bg-gray-500"

# (category, percentage of total budget, colour)
DEFAULT_CATEGORIES = [
    ("Venue", 40, "bg-rose-500"),
    ("Catering", 30, "bg-blue-500"),
    ("Photography", 10, "bg-green-500"),
    ("Flowers", 8, "bg-pink-500"),
    ("Music", 5, "bg-yellow-500"),
    ("Attire", 4, "bg-purple-500"),
    ("Transportation", 2, "bg-indigo-500"),
    ("Miscellaneous", 1, "bg-gray-500"),
]

# A category first created from a booking gets this much headroom over the booked amount
BOOKING_BUDGET_HEADROOM = 1.2

WARNING_THRESHOLD = 90
