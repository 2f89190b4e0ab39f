from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence

from .cart import Cart
from .catalog import CatalogState
from .notifications import NotificationCenter
from .scheduler import Scheduler
from .schemas import CatalogItem, FeaturedProduct
from .showcase import FeaturedShowcase

logger = logging.getLogger(__name__)


@dataclass
class UserSlice:
    user: Optional[Dict[str, Any]] = None
    is_authenticated: bool = False

    def reduce(self, action: str, payload: Dict[str, Any]) -> Any:
        if action == "set":
            self.user = copy.deepcopy(payload["user"])
            self.is_authenticated = True
            return self.user
        if action == "clear":
            self.user = None
            self.is_authenticated = False
            return None
        raise ValueError(f"Unknown user action: {action}")


@dataclass
class UISlice:
    dark_mode: bool = False
    cart_open: bool = False
    is_initialized: bool = False

    @property
    def theme(self) -> str:
        return "dark" if self.dark_mode else "light"

    def reduce(self, action: str, payload: Dict[str, Any]) -> Any:
        if action == "toggle_theme":
            self.dark_mode = not self.dark_mode
            return self.theme
        if action == "open_cart":
            self.cart_open = True
            return True
        if action == "close_cart":
            self.cart_open = False
            return False
        if action == "initialized":
            self.is_initialized = True
            return True
        raise ValueError(f"Unknown ui action: {action}")


@dataclass
class AppState:
    """Per-session application state.

    All mutations go through ``dispatch("<slice>/<action>", **payload)``.
    """

    catalog: CatalogState
    cart: Cart
    showcase: FeaturedShowcase
    notifications: NotificationCenter
    scheduler: Scheduler
    user: UserSlice = field(default_factory=UserSlice)
    ui: UISlice = field(default_factory=UISlice)

    @classmethod
    def create(
        cls,
        products: Sequence[CatalogItem],
        featured: Sequence[FeaturedProduct],
        *,
        clock: Optional[Callable[[], float]] = None,
        price_range: tuple[float, float] = (0.0, 1000.0),
        max_quantity: int = 10,
        confirmation_delay: float = 2.0,
        toast_auto_close_ms: int = 2000,
        dark_mode: bool = False,
    ) -> "AppState":
        notifications = NotificationCenter(auto_close_ms=toast_auto_close_ms)
        scheduler = Scheduler(clock) if clock is not None else Scheduler()
        cart = Cart(notifications)
        showcase = FeaturedShowcase(
            featured,
            cart,
            scheduler,
            confirmation_delay=confirmation_delay,
            max_quantity=max_quantity,
        )
        return cls(
            catalog=CatalogState(products, default_price_range=price_range),
            cart=cart,
            showcase=showcase,
            notifications=notifications,
            scheduler=scheduler,
            ui=UISlice(dark_mode=dark_mode),
        )

    def _reduce_cart(self, action: str, payload: Dict[str, Any]) -> Any:
        if action == "add":
            return self.cart.add_item(payload["item"], payload.get("quantity", 1))
        if action == "remove":
            return self.cart.remove_item(payload["item_id"])
        if action == "update":
            return self.cart.update_quantity(payload["item_id"], payload["quantity"])
        if action == "increment":
            return self.cart.increment(payload["item_id"])
        if action == "decrement":
            return self.cart.decrement(payload["item_id"])
        if action == "clear":
            return self.cart.clear()
        raise ValueError(f"Unknown cart action: {action}")

    def _reduce_catalog(self, action: str, payload: Dict[str, Any]) -> Any:
        catalog = self.catalog
        handlers: Dict[str, Callable[[], Any]] = {
            "load": lambda: catalog.load(payload["items"]),
            "search": lambda: catalog.set_search(payload["term"]),
            "category": lambda: catalog.set_category(payload["category"]),
            "sort": lambda: catalog.set_sort(payload["sort"]),
            "price_range": lambda: catalog.set_price_range(payload["low"], payload["high"]),
            "max_price": lambda: catalog.set_max_price(payload["high"]),
            "toggle_filters": catalog.toggle_filters,
            "reset": catalog.reset,
        }
        if action not in handlers:
            raise ValueError(f"Unknown catalog action: {action}")
        return handlers[action]()

    def _reduce_showcase(self, action: str, payload: Dict[str, Any]) -> Any:
        showcase = self.showcase
        handlers: Dict[str, Callable[[], Any]] = {
            "next": showcase.next,
            "previous": showcase.previous,
            "color": lambda: showcase.select_color(payload["index"]),
            "size": lambda: showcase.select_size(payload["index"]),
            "image": lambda: showcase.select_image(payload["index"]),
            "increment": showcase.increment_quantity,
            "decrement": showcase.decrement_quantity,
            "quantity": lambda: showcase.set_quantity_text(payload["value"]),
            "add": showcase.add_to_cart,
            "close": showcase.close,
        }
        if action not in handlers:
            raise ValueError(f"Unknown showcase action: {action}")
        return handlers[action]()

    def dispatch(self, action_type: str, **payload: Any) -> Any:
        slice_name, _, action = action_type.partition("/")
        logger.debug("dispatch %s %s", action_type, sorted(payload))

        if slice_name == "user":
            return self.user.reduce(action, payload)
        if slice_name == "ui":
            return self.ui.reduce(action, payload)
        if slice_name == "cart":
            return self._reduce_cart(action, payload)
        if slice_name == "catalog":
            return self._reduce_catalog(action, payload)
        if slice_name == "showcase":
            return self._reduce_showcase(action, payload)
        raise ValueError(f"Unknown action type: {action_type}")

    def tick(self) -> int:
        """Fire timers that came due since the last event."""

        return self.scheduler.run_due()
