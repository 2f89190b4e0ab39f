"""Catalog filter/sort engine.

``visible_items`` is a pure function of the item list and a FilterState:
text, category and price predicates are ANDed, then the survivors are
ordered by the selected sort key. Python's ``sorted`` is stable, so
items with equal keys keep their input order for every sort key.

``CatalogState`` keeps the inputs for one session and recomputes the
visible subset after every change.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .schemas import CatalogItem, FilterState, SortKey

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
DEFAULT_PRICE_RANGE: Tuple[float, float] = (0.0, 1000.0)


def matches_search(item: CatalogItem, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return needle in item.name.lower() or needle in item.description.lower()


def matches_category(item: CatalogItem, category: str) -> bool:
    return category == ALL_CATEGORIES or item.category == category


def matches_price(item: CatalogItem, price_range: Tuple[float, float]) -> bool:
    low, high = price_range
    return low <= item.price <= high


def filter_items(items: Iterable[CatalogItem], filters: FilterState) -> List[CatalogItem]:
    return [
        item
        for item in items
        if matches_search(item, filters.search_term)
        and matches_category(item, filters.active_category)
        and matches_price(item, filters.price_range)
    ]


def _id_key(item: CatalogItem) -> Tuple[int, float, str]:
    # numeric ids first in numeric order, then the rest by their text
    if isinstance(item.id, (int, float)):
        return (0, item.id, "")
    return (1, 0, str(item.id))


def sort_items(items: Iterable[CatalogItem], sort_key: SortKey) -> List[CatalogItem]:
    if sort_key == SortKey.PRICE_ASCENDING:
        return sorted(items, key=lambda item: item.price)
    if sort_key == SortKey.PRICE_DESCENDING:
        return sorted(items, key=lambda item: -item.price)
    if sort_key == SortKey.RATING_DESCENDING:
        return sorted(items, key=lambda item: -item.rating)
    return sorted(items, key=_id_key)


def visible_items(items: Iterable[CatalogItem], filters: FilterState) -> List[CatalogItem]:
    return sort_items(filter_items(items, filters), filters.sort_key)


def default_filters(price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE) -> FilterState:
    return FilterState(
        search_term="",
        active_category=ALL_CATEGORIES,
        price_range=price_range,
        sort_key=SortKey.FEATURED,
    )


class CatalogState:
    """Item list plus filter inputs for one session."""

    def __init__(
        self,
        items: Optional[Iterable[CatalogItem]] = None,
        default_price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE,
    ) -> None:
        self.default_price_range = default_price_range
        self.items: List[CatalogItem] = list(items or [])
        self.filters = default_filters(default_price_range)
        self.show_filters = False
        self.visible: List[CatalogItem] = []
        self._recompute()

    def _recompute(self) -> List[CatalogItem]:
        self.visible = visible_items(self.items, self.filters)
        logger.debug(
            "Catalog recomputed: %d of %d items visible", len(self.visible), len(self.items)
        )
        return self.visible

    def _update(self, **changes) -> List[CatalogItem]:
        self.filters = self.filters.model_copy(update=changes)
        return self._recompute()

    def load(self, items: Iterable[CatalogItem]) -> List[CatalogItem]:
        self.items = list(items)
        return self._recompute()

    def set_search(self, term: str) -> List[CatalogItem]:
        return self._update(search_term=term or "")

    def set_category(self, category: str) -> List[CatalogItem]:
        return self._update(active_category=category or ALL_CATEGORIES)

    def set_sort(self, sort: str | SortKey) -> List[CatalogItem]:
        return self._update(sort_key=SortKey.parse(sort))

    def set_price_range(self, low: float, high: float) -> List[CatalogItem]:
        if low < 0 or high < 0 or low > high:
            # inverted or negative ranges keep the previous bounds
            return self.visible
        return self._update(price_range=(float(low), float(high)))

    def set_max_price(self, high: float) -> List[CatalogItem]:
        return self.set_price_range(self.filters.price_range[0], high)

    def toggle_filters(self) -> bool:
        self.show_filters = not self.show_filters
        return self.show_filters

    def reset(self) -> List[CatalogItem]:
        self.filters = default_filters(self.default_price_range)
        return self._recompute()
