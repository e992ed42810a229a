from wedding_planner.modules.reviews.schemas import ReviewCreate
from wedding_planner.modules.reviews.service import ReviewService, average_rating


def test_average_rating_rounds_to_one_decimal():
    assert average_rating([5, 4, 5]) == 4.7
    assert average_rating([4, 5]) == 4.5
    assert average_rating([]) == 0


def test_update_vendor_rating_uses_verified_reviews(supabase):
    supabase.respond("reviews", [{"rating": 5}, {"rating": 4}, {"rating": 5}])

    ReviewService(supabase).update_vendor_rating("v1")

    review_query = supabase.queries_for("reviews")[0]
    assert ("is_verified", True) in [call[1] for call in review_query.called("eq")]

    vendor_update = supabase.queries_for("vendors", "update")[0]
    assert vendor_update.called("update")[0][1][0] == {"rating": 4.7, "review_count": 3}
    assert vendor_update.called("eq")[0][1] == ("id", "v1")


def test_update_vendor_rating_without_reviews_leaves_vendor_alone(supabase):
    supabase.respond("reviews", [])

    ReviewService(supabase).update_vendor_rating("v1")

    assert supabase.queries_for("vendors") == []


def test_create_review_stamps_author_and_refreshes_rating(supabase):
    supabase.respond("reviews", [{
        "id": "r1", "vendor_id": "v1", "user_id": "user-1", "rating": 5, "is_verified": False
    }])
    supabase.respond("reviews", [{"rating": 5}])

    review = ReviewService(supabase).create_review(ReviewCreate(vendor_id="v1", rating=5), "user-1")

    inserted = supabase.queries_for("reviews", "insert")[0].called("insert")[0][1][0]
    assert inserted["user_id"] == "user-1"
    assert review.id == "r1"
    assert supabase.queries_for("vendors", "update")
