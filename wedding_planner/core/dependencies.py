"""
Core dependencies for session resolution and ownership checks
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.core.session import SessionContext
from wedding_planner.modules.auth.service import AuthService
from wedding_planner.modules.users.service import UserService
from supabase import Client
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    return auth_service.get_current_user(token)


def get_session(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    user_service: UserService = Depends(get_user_service)
) -> SessionContext:
    """Resolve the caller's session; 401 when the token is missing or invalid"""
    token = credentials.credentials
    user_data = auth_service.get_current_user(token)
    return SessionContext(user_data, token, user_service)


def get_optional_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(optional_security),
    auth_service: AuthService = Depends(get_auth_service),
    user_service: UserService = Depends(get_user_service)
) -> Optional[SessionContext]:
    """Like get_session, but anonymous visitors get None instead of 401"""
    if credentials is None:
        return None
    try:
        user_data = auth_service.get_current_user(credentials.credentials)
    except HTTPException:
        return None
    return SessionContext(user_data, credentials.credentials, user_service)


def require_role(*roles: str):
    """Factory function to create a role check dependency. Admins pass every check."""
    def check_role(session: SessionContext = Depends(get_session)) -> SessionContext:
        if session.is_admin:
            return session
        if session.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient role. Required one of: {', '.join(roles)}"
            )
        return session
    return check_role


def require_admin(session: SessionContext = Depends(get_session)) -> SessionContext:
    if not session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return session


def _fetch_one(supabase: Client, table: str, columns: str, record_id: str) -> Optional[Dict[str, Any]]:
    result = supabase.table(table)\
        .select(columns)\
        .eq("id", record_id)\
        .maybe_single()\
        .execute()
    if not result or not result.data:
        return None
    return result.data


def check_event_access(
    event_id: str,
    session: Optional[SessionContext],
    supabase: Client,
    allow_public: bool = False
) -> Dict[str, Any]:
    """Allow the event owner or an admin; with allow_public, anyone may read a public event"""
    event = _fetch_one(supabase, "events", "id, created_by, is_public", event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found"
        )
    if allow_public and event.get("is_public"):
        return event
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated"
        )
    if event.get("created_by") == session.user_id or session.is_admin:
        return event
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You must be the event owner to access it"
    )


def check_record_event_access(
    table: str,
    record_id: str,
    session: Optional[SessionContext],
    supabase: Client,
    allow_public: bool = False
) -> Dict[str, Any]:
    """Resolve a child row (task, guest, budget item, ...) to its event and check access to that event"""
    record = _fetch_one(supabase, table, "id, event_id", record_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Record not found"
        )
    check_event_access(record["event_id"], session, supabase, allow_public=allow_public)
    return record


def check_vendor_owner(vendor_id: str, session: SessionContext) -> SessionContext:
    """A vendor profile is keyed by its owner's auth id"""
    if vendor_id == session.user_id or session.is_admin:
        return session
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You can only manage your own vendor profile"
    )


def check_booking_party(booking_id: str, session: SessionContext, supabase: Client) -> Dict[str, Any]:
    """Allow the booking couple, the booked vendor, or an admin"""
    booking = _fetch_one(supabase, "bookings", "id, couple_id, vendor_id", booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )
    if session.user_id in (booking.get("couple_id"), booking.get("vendor_id")) or session.is_admin:
        return booking
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You must be a party to this booking"
    )
