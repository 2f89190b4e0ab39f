from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .cart import Cart
from .scheduler import Scheduler, TimerToken
from .schemas import CartLine, FeaturedProduct

logger = logging.getLogger(__name__)


class FeaturedShowcase:
    """Carousel over featured products with per-product variant selection.

    Moving to another product resets color, size, quantity and image
    selection. Adding to the cart raises a confirmation flag that a
    scheduled timer clears after ``confirmation_delay`` seconds.
    """

    def __init__(
        self,
        products: Sequence[FeaturedProduct],
        cart: Cart,
        scheduler: Scheduler,
        confirmation_delay: float = 2.0,
        max_quantity: int = 10,
    ) -> None:
        if not products:
            raise ValueError("showcase needs at least one product")
        self.products: List[FeaturedProduct] = list(products)
        self.cart = cart
        self.scheduler = scheduler
        self.confirmation_delay = confirmation_delay
        self.max_quantity = max_quantity

        self.index = 0
        self.selected_color = 0
        self.selected_size = 0
        self.quantity = 1
        self.image_index = 0
        self.is_added_to_cart = False
        self._revert_token: Optional[TimerToken] = None

    @property
    def current(self) -> FeaturedProduct:
        return self.products[self.index]

    def _reset_selection(self) -> None:
        self.scheduler.cancel(self._revert_token)
        self._revert_token = None
        self.selected_color = 0
        self.selected_size = 0
        self.quantity = 1
        self.image_index = 0
        self.is_added_to_cart = False

    def next(self) -> int:
        self.index = 0 if self.index == len(self.products) - 1 else self.index + 1
        self._reset_selection()
        return self.index

    def previous(self) -> int:
        self.index = len(self.products) - 1 if self.index == 0 else self.index - 1
        self._reset_selection()
        return self.index

    def select_color(self, index: int) -> int:
        if 0 <= index < len(self.current.colors):
            self.selected_color = index
        return self.selected_color

    def select_size(self, index: int) -> int:
        if 0 <= index < len(self.current.sizes):
            self.selected_size = index
        return self.selected_size

    def select_image(self, index: int) -> int:
        if 0 <= index < len(self.current.images):
            self.image_index = index
        return self.image_index

    def increment_quantity(self) -> int:
        if self.quantity < self.max_quantity:
            self.quantity += 1
        return self.quantity

    def decrement_quantity(self) -> int:
        if self.quantity > 1:
            self.quantity -= 1
        return self.quantity

    def set_quantity_text(self, text: str) -> int:
        try:
            value = int(str(text).strip())
        except ValueError:
            return self.quantity
        if 1 <= value <= self.max_quantity:
            self.quantity = value
        return self.quantity

    def _clear_confirmation(self) -> None:
        self.is_added_to_cart = False
        self._revert_token = None

    def add_to_cart(self) -> Optional[CartLine]:
        if self.is_added_to_cart:
            return None

        product = self.current
        color = product.colors[self.selected_color] if product.colors else None
        size = product.sizes[self.selected_size] if product.sizes else None
        line = self.cart.add_item(
            product,
            self.quantity,
            selected_color=color,
            selected_size=size,
            image=product.thumbnail,
        )

        self.is_added_to_cart = True
        self._revert_token = self.scheduler.schedule(
            self.confirmation_delay, self._clear_confirmation
        )
        logger.debug("Showcase added product %s (qty %s)", product.id, self.quantity)
        return line

    def close(self) -> None:
        """Drop the pending confirmation timer."""

        self.scheduler.cancel(self._revert_token)
        self._revert_token = None

    def snapshot(self) -> dict:
        product = self.current
        return {
            "index": self.index,
            "count": len(self.products),
            "product": product.model_dump(),
            "selected_color": self.selected_color,
            "selected_size": self.selected_size,
            "quantity": self.quantity,
            "image_index": self.image_index,
            "image": product.images[self.image_index] if product.images else "",
            "is_added_to_cart": self.is_added_to_cart,
            "can_increment": self.quantity < self.max_quantity,
            "can_decrement": self.quantity > 1,
        }
