"""Cart engine.

Lines are keyed by item id and kept in insertion order. Each line owns a
deep copy of the item taken at add time, so later catalog edits never
change what the cart charges.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .notifications import NotificationCenter
from .schemas import CartLine, CatalogItem, ItemId

logger = logging.getLogger(__name__)


def money(amount: float) -> str:
    return f"${amount:.2f}"


class Cart:
    def __init__(self, notifier: Optional[NotificationCenter] = None) -> None:
        self.notifier = notifier or NotificationCenter()
        self.lines: List[CartLine] = []

    def _find(self, item_id: ItemId) -> Optional[CartLine]:
        return next((line for line in self.lines if line.item_id == item_id), None)

    def get(self, item_id: ItemId) -> Optional[CartLine]:
        return self._find(item_id)

    def add_item(
        self,
        item: CatalogItem,
        quantity: int = 1,
        *,
        selected_color: Optional[str] = None,
        selected_size: Optional[str] = None,
        image: Optional[str] = None,
    ) -> CartLine:
        """Add ``quantity`` of ``item``, merging into an existing line.

        The merged quantity is not capped.
        """

        line = self._find(item.id)
        if line is not None:
            line.quantity += quantity
        else:
            line = CartLine(
                item=item.model_copy(deep=True),
                quantity=quantity,
                selected_color=selected_color,
                selected_size=selected_size,
                image=image if image is not None else item.thumbnail,
            )
            self.lines.append(line)

        logger.debug("Cart add id=%s qty=%s -> %s", item.id, quantity, line.quantity)
        self.notifier.success(f"Added {item.name} to cart!")
        return line

    def remove_item(self, item_id: ItemId) -> bool:
        before = len(self.lines)
        self.lines = [line for line in self.lines if line.item_id != item_id]
        removed = len(self.lines) != before
        self.notifier.info("Item removed from cart")
        return removed

    def update_quantity(self, item_id: ItemId, new_quantity: int) -> bool:
        if new_quantity < 1:
            return False
        line = self._find(item_id)
        if line is None:
            return False
        line.quantity = new_quantity
        return True

    def increment(self, item_id: ItemId) -> bool:
        line = self._find(item_id)
        return line is not None and self.update_quantity(item_id, line.quantity + 1)

    def decrement(self, item_id: ItemId) -> bool:
        line = self._find(item_id)
        return line is not None and self.update_quantity(item_id, line.quantity - 1)

    def clear(self) -> None:
        self.lines = []

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> float:
        return sum(line.line_total for line in self.lines)

    @property
    def badge_count(self) -> Optional[int]:
        return self.total_items if self.lines else None

    def summary(self) -> dict:
        return {
            "items": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "subtotal": round(self.subtotal, 2),
            "total": round(self.subtotal, 2),
            "shipping": "Calculated at checkout",
            "badge_count": self.badge_count,
        }
