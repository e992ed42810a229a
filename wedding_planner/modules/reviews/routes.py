from fastapi import APIRouter, Depends, HTTPException, status
from wedding_planner.database.supabase_client import get_supabase, get_service_supabase
from wedding_planner.modules.reviews.schemas import ReviewCreate, ReviewResponse, ReviewVerification
from wedding_planner.modules.reviews.service import ReviewService
from wedding_planner.core.dependencies import get_session, require_admin
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List

router = APIRouter(prefix="/reviews", tags=["reviews"])


def get_review_service(supabase: Client = Depends(get_supabase)) -> ReviewService:
    return ReviewService(supabase)


@router.get("/vendor/{vendor_id}", response_model=List[ReviewResponse])
async def list_vendor_reviews(
    vendor_id: str,
    service: ReviewService = Depends(get_review_service)
):
    return service.get_vendor_reviews(vendor_id)


@router.post("", response_model=ReviewResponse, status_code=201)
async def create_review(
    review_data: ReviewCreate,
    session: SessionContext = Depends(get_session),
    service: ReviewService = Depends(get_review_service)
):
    if review_data.vendor_id == session.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Vendors cannot review themselves")
    return service.create_review(review_data, session.user_id)


@router.put("/{review_id}/verification", response_model=ReviewResponse)
async def set_review_verification(
    review_id: str,
    verification: ReviewVerification,
    session: SessionContext = Depends(require_admin),
    supabase: Client = Depends(get_service_supabase)
):
    """Verify or unverify a review (admin only); the vendor rating follows"""
    return ReviewService(supabase).set_review_verification(review_id, verification.is_verified)


@router.delete("/{review_id}", status_code=204)
async def delete_review(
    review_id: str,
    session: SessionContext = Depends(get_session),
    service: ReviewService = Depends(get_review_service)
):
    review = service.get_review_by_id(review_id)
    if review.user_id != session.user_id and not session.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You can only delete your own reviews")
    service.delete_review(review_id)
    return None
