# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - User login and session management
# - JWT token generation and validation

"""
Supabase Auth provides:
- auth.sign_up() - Register new users (name and role kept in user_metadata)
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Get current user from JWT token
- auth.sign_out() - Logout users

Auth state events emitted by AuthService to registered listeners:
- SIGNED_IN  - after a successful login
- SIGNED_OUT - after logout

The application profile lives in the public `users` table (see modules/users/models.py).
"""

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"
