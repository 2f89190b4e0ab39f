from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

ItemId = Union[int, str]


class SortKey(str, Enum):
    FEATURED = "featured"
    PRICE_ASCENDING = "price-ascending"
    PRICE_DESCENDING = "price-descending"
    RATING_DESCENDING = "rating-descending"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortKey":
        """Resolve a sort value, accepting the short UI aliases.

        Unknown values fall back to ``featured``.
        """

        if isinstance(value, SortKey):
            return value
        value = (value or "").strip().lower()
        aliases = {
            "price-low": cls.PRICE_ASCENDING,
            "price-high": cls.PRICE_DESCENDING,
            "rating": cls.RATING_DESCENDING,
        }
        if value in aliases:
            return aliases[value]
        try:
            return cls(value)
        except ValueError:
            return cls.FEATURED


class CatalogItem(BaseModel):
    id: ItemId
    name: str
    price: float = Field(ge=0)
    category: str = "general"
    rating: float = Field(0.0, ge=0.0, le=5.0)
    description: str = ""
    images: List[str] = Field(default_factory=list)

    @property
    def thumbnail(self) -> str:
        return self.images[0] if self.images else ""


class FeaturedProduct(CatalogItem):
    category: str = "featured"
    colors: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    review_count: int = 0


class FilterState(BaseModel):
    search_term: str = ""
    active_category: str = "all"
    price_range: Tuple[float, float] = (0.0, 1000.0)
    sort_key: SortKey = SortKey.FEATURED

    @model_validator(mode="after")
    def _check_price_range(self) -> "FilterState":
        low, high = self.price_range
        if low < 0 or high < 0:
            raise ValueError("price range bounds must be >= 0")
        if low > high:
            raise ValueError("price range min must be <= max")
        return self


@dataclass
class CartLine:
    """One cart entry: a snapshot of the item taken when it was added."""

    item: CatalogItem
    quantity: int
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None
    image: str = ""

    @property
    def item_id(self) -> ItemId:
        return self.item.id

    @property
    def line_total(self) -> float:
        return self.item.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "id": self.item.id,
            "name": self.item.name,
            "price": self.item.price,
            "quantity": self.quantity,
            "selected_color": self.selected_color,
            "selected_size": self.selected_size,
            "image": self.image or self.item.thumbnail,
            "line_total": round(self.line_total, 2),
        }
