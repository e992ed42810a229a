from wedding_planner.core.filters import quote_filter_value
from wedding_planner.modules.vendors.service import VendorService


def test_search_term_is_quoted_inside_the_filter(supabase):
    supabase.respond("vendors", [{"id": "v1", "name": "Flowers, Inc.", "category": "flowers"}])

    vendors = VendorService(supabase).search_vendors("Flowers, Inc.")

    assert [v.name for v in vendors] == ["Flowers, Inc."]
    condition = supabase.queries_for("vendors")[0].called("or_")[0][1][0]
    assert condition == 'name.ilike."%Flowers, Inc.%",description.ilike."%Flowers, Inc.%"'


def test_search_term_with_parentheses_and_quotes():
    assert quote_filter_value('%Smith (Events) "Co"%') == '"%Smith (Events) \\"Co\\"%"'


def test_search_filters_category_and_location(supabase):
    VendorService(supabase).search_vendors(None, "catering", "Austin")

    query = supabase.queries_for("vendors")[0]
    assert query.called("or_") == []
    assert ("category", "catering") in [call[1] for call in query.called("eq")]
    assert query.called("ilike")[0][1] == ("location", "%Austin%")


def test_all_category_is_not_a_filter(supabase):
    VendorService(supabase).search_vendors(category="all")

    query = supabase.queries_for("vendors")[0]
    assert [call[1] for call in query.called("eq")] == [("is_approved", True)]
