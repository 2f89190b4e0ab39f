import pytest
from pydantic import ValidationError

from shopsphere.catalog import CatalogState, default_filters, visible_items
from shopsphere.schemas import CatalogItem, FilterState, SortKey


def _item(id, name, price, category="general", rating=4.0, description=""):
    return CatalogItem(
        id=id, name=name, price=price, category=category, rating=rating, description=description
    )


@pytest.fixture
def items():
    return [
        _item(1, "Wireless Headphones", 129.99, "electronics", 4.5, "noise-cancelling"),
        _item(2, "Designer Watch", 249.99, "accessories", 4.8, "Swiss movement"),
        _item(3, "Smart Speaker", 89.99, "electronics", 4.2, "voice assistant"),
        _item(4, "Cotton T-Shirt", 34.99, "clothing", 4.0, "organic and soft"),
    ]


def _filters(**overrides):
    return default_filters().model_copy(update=overrides)


def test_visible_items_combines_category_price_and_sort(items):
    filters = _filters(
        active_category="electronics",
        price_range=(50.0, 200.0),
        sort_key=SortKey.PRICE_ASCENDING,
    )
    assert [i.id for i in visible_items(items, filters)] == [3, 1]


def test_search_is_case_insensitive_over_name_and_description(items):
    assert [i.id for i in visible_items(items, _filters(search_term="WATCH"))] == [2]
    assert [i.id for i in visible_items(items, _filters(search_term="Organic"))] == [4]


def test_price_bounds_are_inclusive(items):
    filters = _filters(price_range=(34.99, 89.99))
    assert [i.id for i in visible_items(items, filters)] == [3, 4]


def test_no_match_returns_empty_list(items):
    assert visible_items(items, _filters(search_term="submarine")) == []


def test_featured_sort_orders_by_id():
    shuffled = [_item(3, "c", 1), _item(1, "a", 1), _item(2, "b", 1)]
    assert [i.id for i in visible_items(shuffled, _filters())] == [1, 2, 3]


def test_equal_keys_keep_input_order():
    tied = [_item(5, "first", 10.0, rating=4.0), _item(2, "second", 10.0, rating=4.0)]
    for key in (SortKey.PRICE_ASCENDING, SortKey.PRICE_DESCENDING, SortKey.RATING_DESCENDING):
        assert [i.name for i in visible_items(tied, _filters(sort_key=key))] == ["first", "second"]


def test_descending_sorts(items):
    by_price = visible_items(items, _filters(sort_key=SortKey.PRICE_DESCENDING))
    assert [i.id for i in by_price] == [2, 1, 3, 4]
    by_rating = visible_items(items, _filters(sort_key=SortKey.RATING_DESCENDING))
    assert [i.id for i in by_rating] == [2, 1, 3, 4]


def test_visible_items_is_idempotent(items):
    filters = _filters(search_term="s", sort_key=SortKey.PRICE_ASCENDING)
    first = visible_items(items, filters)
    assert visible_items(first, filters) == first


def test_sort_aliases_and_unknown_fallback():
    assert SortKey.parse("price-low") is SortKey.PRICE_ASCENDING
    assert SortKey.parse("price-high") is SortKey.PRICE_DESCENDING
    assert SortKey.parse("rating") is SortKey.RATING_DESCENDING
    assert SortKey.parse("rating-descending") is SortKey.RATING_DESCENDING
    assert SortKey.parse("bogus") is SortKey.FEATURED
    assert SortKey.parse(None) is SortKey.FEATURED


def test_filter_state_rejects_inverted_range():
    with pytest.raises(ValidationError):
        FilterState(price_range=(300.0, 100.0))
    with pytest.raises(ValidationError):
        FilterState(price_range=(-1.0, 100.0))


def test_catalog_state_recomputes_after_each_change(items):
    catalog = CatalogState(items)
    assert len(catalog.visible) == 4

    catalog.set_category("electronics")
    assert [i.id for i in catalog.visible] == [1, 3]

    catalog.set_sort("price-low")
    assert [i.id for i in catalog.visible] == [3, 1]

    catalog.set_max_price(100)
    assert [i.id for i in catalog.visible] == [3]


def test_catalog_state_ignores_invalid_price_range(items):
    catalog = CatalogState(items)
    catalog.set_price_range(50, 150)
    catalog.set_price_range(200, 100)
    assert catalog.filters.price_range == (50.0, 150.0)
    assert [i.id for i in catalog.visible] == [1, 3]


def test_reset_restores_defaults(items):
    catalog = CatalogState(items)
    catalog.set_search("watch")
    catalog.set_category("accessories")
    catalog.set_price_range(10, 20)
    catalog.reset()
    assert catalog.filters == default_filters()
    assert len(catalog.visible) == len(items)


def test_toggle_filters_flips_panel(items):
    catalog = CatalogState(items)
    assert catalog.toggle_filters() is True
    assert catalog.toggle_filters() is False


def test_load_replaces_items(items):
    catalog = CatalogState()
    assert catalog.visible == []
    catalog.load(items[:2])
    assert [i.id for i in catalog.visible] == [1, 2]


def test_two_item_price_descending_example():
    items = [
        _item(1, "a", 10, "a", 4.0),
        _item(2, "b", 50, "b", 4.8),
    ]
    filters = _filters(price_range=(0.0, 100.0), sort_key=SortKey.PRICE_DESCENDING)
    assert [i.id for i in visible_items(items, filters)] == [2, 1]
