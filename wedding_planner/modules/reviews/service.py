from supabase import Client
from wedding_planner.core.math_utils import round_half_up
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.reviews.schemas import ReviewCreate, ReviewResponse
from typing import Iterable, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def average_rating(ratings: Iterable[float]) -> float:
    """Mean rating to one decimal, rounding halves up"""
    ratings = list(ratings)
    if not ratings:
        return 0
    return round_half_up(sum(ratings) / len(ratings), 1)


class ReviewService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_vendor_reviews(self, vendor_id: str) -> List[ReviewResponse]:
        """Verified reviews of a vendor with reviewer names, newest first"""
        try:
            result = self.supabase.table("reviews")\
                .select("*, users(name)")\
                .eq("vendor_id", vendor_id)\
                .eq("is_verified", True)\
                .order("created_at", desc=True)\
                .execute()
            return [ReviewResponse(**review) for review in result.data]
        except Exception as e:
            logger.error(f"Error fetching vendor reviews: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_review_by_id(self, review_id: str) -> ReviewResponse:
        try:
            result = self.supabase.table("reviews")\
                .select("*")\
                .eq("id", review_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Review not found")

            return ReviewResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_review(self, review_data: ReviewCreate, user_id: Optional[str]) -> ReviewResponse:
        """Store a review by the caller and refresh the vendor's rating"""
        user_id = ensure_authenticated(user_id)
        try:
            data = review_data.model_dump()
            data["user_id"] = user_id

            result = self.supabase.table("reviews").insert(data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create review")

            review = ReviewResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating review: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        self.update_vendor_rating(review.vendor_id)
        return review

    def set_review_verification(self, review_id: str, is_verified: bool) -> ReviewResponse:
        try:
            result = self.supabase.table("reviews")\
                .update({"is_verified": is_verified})\
                .eq("id", review_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Review not found")

            review = ReviewResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error verifying review: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        self.update_vendor_rating(review.vendor_id)
        return review

    def delete_review(self, review_id: str) -> bool:
        review = self.get_review_by_id(review_id)
        try:
            self.supabase.table("reviews")\
                .delete()\
                .eq("id", review_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting review: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        self.update_vendor_rating(review.vendor_id)
        return True

    def update_vendor_rating(self, vendor_id: str) -> None:
        """
        Recompute vendors.rating and review_count from verified reviews.

        Failures are logged, not raised: the review itself is already stored.
        A vendor with no verified reviews keeps its current figures.
        """
        try:
            result = self.supabase.table("reviews")\
                .select("rating")\
                .eq("vendor_id", vendor_id)\
                .eq("is_verified", True)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching reviews for rating calculation: {e}")
            return

        ratings = [review["rating"] for review in result.data or []]
        if not ratings:
            return

        try:
            self.supabase.table("vendors")\
                .update({"rating": average_rating(ratings), "review_count": len(ratings)})\
                .eq("id", vendor_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating vendor rating: {e}")
