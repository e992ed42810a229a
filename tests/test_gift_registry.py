import pytest
from fastapi import HTTPException

from wedding_planner.modules.gift_registry.service import GiftRegistryService

ITEM = {"id": "gift-1", "event_id": "e1", "name": "Stand mixer", "price": 300, "quantity": 1, "purchased": 0}


def test_mark_gift_purchased_increments(supabase):
    supabase.respond("gift_registry_items", ITEM)
    supabase.respond("gift_registry_items", [{**ITEM, "purchased": 1}])

    item = GiftRegistryService(supabase).mark_gift_purchased("gift-1")

    update = supabase.queries_for("gift_registry_items", "update")[0].called("update")[0]
    assert update[1][0] == {"purchased": 1}
    assert item.purchased == 1


def test_mark_gift_purchased_is_not_capped_at_quantity(supabase):
    supabase.respond("gift_registry_items", {**ITEM, "purchased": 1})
    supabase.respond("gift_registry_items", [{**ITEM, "purchased": 3}])

    item = GiftRegistryService(supabase).mark_gift_purchased("gift-1", count=2)

    update = supabase.queries_for("gift_registry_items", "update")[0].called("update")[0]
    assert update[1][0] == {"purchased": 3}
    assert item.purchased > item.quantity


def test_public_registry_of_private_event_is_forbidden(supabase):
    supabase.respond("events", {"is_public": False})

    with pytest.raises(HTTPException) as exc:
        GiftRegistryService(supabase).get_public_gift_registry("e1")

    assert exc.value.status_code == 403
    assert supabase.queries_for("gift_registry_items") == []


def test_public_registry_of_missing_event(supabase):
    supabase.respond("events", None)

    with pytest.raises(HTTPException) as exc:
        GiftRegistryService(supabase).get_public_gift_registry("nope")

    assert exc.value.status_code == 404


def test_public_registry_of_public_event(supabase):
    supabase.respond("events", {"is_public": True})
    supabase.respond("gift_registry_items", [ITEM])

    items = GiftRegistryService(supabase).get_public_gift_registry("e1")

    assert [i.name for i in items] == ["Stand mixer"]
