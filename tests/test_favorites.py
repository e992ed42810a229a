import pytest
from fastapi import HTTPException

from wedding_planner.modules.favorites.service import FavoriteService

VENDOR = {"id": "v1", "name": "Petal Studio", "category": "flowers", "is_approved": True}


def test_adding_a_favorite_twice_inserts_once(supabase):
    supabase.respond("favorite_vendors", [])
    supabase.respond("favorite_vendors", [{"id": "f1", "user_id": "user-1", "vendor_id": "v1"}])
    supabase.respond("favorite_vendors", [{"id": "f1"}])

    service = FavoriteService(supabase)
    assert service.add_favorite_vendor("user-1", "v1") is True
    assert service.add_favorite_vendor("user-1", "v1") is True

    inserts = supabase.queries_for("favorite_vendors", "insert")
    assert len(inserts) == 1
    assert inserts[0].called("insert")[0][1][0] == {"user_id": "user-1", "vendor_id": "v1"}


def test_favorite_vendors_are_limited_to_approved(supabase):
    supabase.respond("favorite_vendors", [{"vendor_id": "v1"}, {"vendor_id": "v2"}])
    supabase.respond("vendors", [VENDOR])

    vendors = FavoriteService(supabase).get_favorite_vendors("user-1")

    assert [v.id for v in vendors] == ["v1"]
    query = supabase.queries_for("vendors")[0]
    assert query.called("in_")[0][1] == ("id", ["v1", "v2"])
    assert ("is_approved", True) in [call[1] for call in query.called("eq")]


def test_no_favorites_skips_vendor_lookup(supabase):
    assert FavoriteService(supabase).get_favorite_vendors("user-1") == []
    assert supabase.queries_for("vendors") == []


def test_anonymous_user_has_no_favorites(supabase):
    assert FavoriteService(supabase).is_vendor_favorite(None, "v1") is False
    assert supabase.queries == []


def test_adding_a_favorite_requires_a_user(supabase):
    with pytest.raises(HTTPException) as exc:
        FavoriteService(supabase).add_favorite_vendor(None, "v1")

    assert exc.value.status_code == 401
