from fastapi import APIRouter, Depends, HTTPException, status
from wedding_planner.modules.users.schemas import UserProfile, UserProfileCreate, UserUpdate, ApprovalRequest, UserRole
from wedding_planner.modules.users.service import UserService
from wedding_planner.core.dependencies import get_session, get_user_service, require_admin
from wedding_planner.core.session import SessionContext
from typing import List, Optional

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/me/profile", response_model=UserProfile)
async def ensure_my_profile(
    profile_data: UserProfileCreate,
    session: SessionContext = Depends(get_session),
    service: UserService = Depends(get_user_service)
):
    """Ensure the caller has a profile row, using the given name and role on first creation"""
    return service.ensure_user_profile(session.user, name=profile_data.name, role=profile_data.role)


@router.put("/me", response_model=UserProfile)
async def update_my_profile(
    user_data: UserUpdate,
    session: SessionContext = Depends(get_session),
    service: UserService = Depends(get_user_service)
):
    """Update the caller's own profile"""
    return service.update_user_profile(session.user_id, user_data)


@router.get("", response_model=List[UserProfile])
async def list_users(
    role: Optional[UserRole] = None,
    limit: int = 50,
    offset: int = 0,
    session: SessionContext = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """List users (admin only)"""
    return service.list_users(role=role, limit=limit, offset=offset)


@router.get("/pending", response_model=List[UserProfile])
async def list_pending_users(
    session: SessionContext = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Users awaiting approval (admin only)"""
    return service.list_pending_approvals()


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    session: SessionContext = Depends(get_session),
    service: UserService = Depends(get_user_service)
):
    """Get a profile: own profile, or any profile for admins"""
    if user_id != session.user_id and not session.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not accessible")
    return service.get_user_by_id(user_id)


@router.put("/{user_id}/approval", response_model=UserProfile)
async def set_user_approval(
    user_id: str,
    approval: ApprovalRequest,
    session: SessionContext = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Approve or reject a user (admin only)"""
    return service.set_approval(user_id, approval.is_approved)
