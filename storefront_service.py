"""
ShopSphere storefront API.

Run with:
    uvicorn storefront_service:app --reload --port 8000
"""

from __future__ import annotations

import html
import logging
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from config import load_catalog, settings
from shopsphere.auth import AuthBootstrap, HostedAuthWidget
from shopsphere.backend import ApperClient, RecordClient
from shopsphere.cart import money
from shopsphere.demo_data import CATEGORIES, DEMO_PRODUCTS, FEATURED_PRODUCTS
from shopsphere.errors import AuthenticationError, RecordServiceError
from shopsphere.icons import get_icon, render_rating
from shopsphere.logging_config import setup_logging
from shopsphere.notifications import Toast
from shopsphere.schemas import CatalogItem, ItemId
from shopsphere.services.base import RecordService
from shopsphere.services.registry import build_services
from shopsphere.state import AppState

logger = logging.getLogger("shopsphere.web")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    yield


app = FastAPI(title="ShopSphere Storefront", version=settings.version, lifespan=lifespan)

_CLIENT: Optional[RecordClient] = None
_SERVICES: Dict[str, RecordService] = {}
_SESSIONS: Dict[str, "StorefrontSession"] = {}


@dataclass
class StorefrontSession:
    state: AppState
    widget: HostedAuthWidget
    auth: Optional[AuthBootstrap] = None
    location: str = "/"
    redirect: Optional[str] = None


# Request models
class CartAddRequest(BaseModel):
    product_id: Union[int, str]
    quantity: int = 1


class AuthCallbackRequest(BaseModel):
    user: Optional[Dict[str, Any]] = None
    path: str = "/"


class AuthErrorRequest(BaseModel):
    message: str = "Authentication failed"


def _client() -> RecordClient:
    global _CLIENT
    if _CLIENT is None:
        _CLIENT = ApperClient()
    return _CLIENT


def _services() -> Dict[str, RecordService]:
    global _SERVICES
    if not _SERVICES:
        _SERVICES = build_services(_client())
    return _SERVICES


def _products() -> List[CatalogItem]:
    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    return list(DEMO_PRODUCTS)


def _new_session() -> StorefrontSession:
    state = AppState.create(
        _products(),
        FEATURED_PRODUCTS,
        price_range=(settings.price_min, settings.price_max),
        max_quantity=settings.max_quantity,
        confirmation_delay=settings.confirmation_delay,
        toast_auto_close_ms=settings.toast_auto_close_ms,
        dark_mode=settings.default_theme == "dark",
    )
    widget = HostedAuthWidget()
    session = StorefrontSession(state=state, widget=widget)

    def navigate(path: str) -> None:
        session.redirect = path

    session.auth = AuthBootstrap(
        widget,
        location=lambda: session.location,
        navigate=navigate,
        dispatch=state.dispatch,
        notifier=state.notifications,
    )
    session.auth.start(_client(), settings.apper_project_id)
    return session


def _get_session(session_id: str) -> StorefrontSession:
    """Return the session for ``session_id``, evicting the least recently used one when full."""
    if session_id in _SESSIONS:
        session = _SESSIONS.pop(session_id)
    else:
        while _SESSIONS and len(_SESSIONS) >= settings.max_sessions:
            evicted = next(iter(_SESSIONS))
            del _SESSIONS[evicted]
            logger.info("Evicted storefront session %s", evicted)
        session = _new_session()
        logger.info("Started storefront session %s", session_id)
    _SESSIONS[session_id] = session
    session.state.tick()
    return session


def _coerce_id(raw: Union[int, str]) -> ItemId:
    if isinstance(raw, str) and raw.isdigit():
        return int(raw)
    return raw


def _find_product(state: AppState, product_id: ItemId) -> CatalogItem:
    candidates = list(state.catalog.items) + list(state.showcase.products)
    product = next((p for p in candidates if p.id == product_id), None)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _cart_payload(state: AppState) -> Dict[str, Any]:
    payload = state.cart.summary()
    payload["cart_open"] = state.ui.cart_open
    payload["toasts"] = state.notifications.drain()
    return payload


def _showcase_payload(state: AppState) -> Dict[str, Any]:
    payload = state.showcase.snapshot()
    payload["toasts"] = state.notifications.drain()
    return payload


@app.exception_handler(RecordServiceError)
async def _record_error_handler(request: Request, exc: RecordServiceError) -> JSONResponse:
    toast = Toast(level="error", message="Something went wrong while loading data.")
    return JSONResponse(
        status_code=502,
        content={
            "error_banner": str(exc),
            "table": exc.table,
            "operation": exc.operation,
            "toasts": [asdict(toast)],
        },
    )


# Pages

def _page(title: str, body: str, state: Optional[AppState] = None) -> str:
    theme = state.ui.theme if state else settings.default_theme
    badge = ""
    if state and state.cart.badge_count:
        badge = f" <span class='badge'>{state.cart.badge_count}</span>"
    return (
        f"<!doctype html><html class='{theme}'><head><title>{html.escape(title)}</title></head>"
        f"<body><header><a href='/'>{get_icon('ShoppingCart')} ShopSphere</a>{badge}</header>"
        f"<main>{body}</main>"
        f"<footer>&copy; ShopSphere. All rights reserved.</footer></body></html>"
    )


@app.get("/", response_class=HTMLResponse)
def serve_homepage(session_id: str = Query("default")):
    """Serve the catalog root."""
    state = _get_session(session_id).state
    cards = "".join(
        f"<li><h3>{html.escape(p.name)}</h3><span>{money(p.price)}</span>"
        f"<p>{render_rating(p.rating)}</p><p>{html.escape(p.description)}</p></li>"
        for p in state.catalog.visible
    )
    if not cards:
        cards = f"<li>{get_icon('SearchX')} No products found</li>"
    return _page("ShopSphere", f"<h2>Featured Products</h2><ul>{cards}</ul>", state)


@app.get("/login", response_class=HTMLResponse)
def serve_login_page():
    return _page("Login", "<div id='authentication'></div>")


@app.get("/signup", response_class=HTMLResponse)
def serve_signup_page():
    return _page("Sign up", "<div id='authentication'></div>")


@app.get("/callback", response_class=HTMLResponse)
def serve_callback_page():
    return _page("Signing in", "<div id='authentication'></div>")


@app.get("/error", response_class=HTMLResponse)
def serve_error_page(message: str = Query("Authentication failed")):
    return _page("Error", f"<h1>Error</h1><p>{html.escape(message)}</p>")


# Catalog

@app.get("/api/products")
def get_products(
    session_id: str = Query("default"),
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    sort: Optional[str] = None,
):
    """Apply any given filter inputs and return the visible products."""
    state = _get_session(session_id).state

    if search is not None:
        state.dispatch("catalog/search", term=search)
    if category is not None:
        state.dispatch("catalog/category", category=category)
    if min_price is not None or max_price is not None:
        low, high = state.catalog.filters.price_range
        state.dispatch(
            "catalog/price_range",
            low=low if min_price is None else min_price,
            high=high if max_price is None else max_price,
        )
    if sort is not None:
        state.dispatch("catalog/sort", sort=sort)

    visible = state.catalog.visible
    return {
        "products": [p.model_dump() for p in visible],
        "total": len(visible),
        "filters": state.catalog.filters.model_dump(mode="json"),
    }


@app.post("/api/products/reset")
def reset_filters(session_id: str = Query("default")):
    state = _get_session(session_id).state
    visible = state.dispatch("catalog/reset")
    return {
        "products": [p.model_dump() for p in visible],
        "total": len(visible),
        "filters": state.catalog.filters.model_dump(mode="json"),
    }


@app.get("/api/categories")
def get_categories(session_id: str = Query("default")):
    state = _get_session(session_id).state
    categories = list(CATEGORIES)
    for item in state.catalog.items:
        if item.category not in categories:
            categories.append(item.category)
    return {"categories": categories, "active": state.catalog.filters.active_category}


# Cart

@app.get("/api/cart")
def get_cart(session_id: str = Query("default")):
    return _cart_payload(_get_session(session_id).state)


@app.post("/api/cart/add")
def add_to_cart(item: CartAddRequest, session_id: str = Query("default")):
    if item.quantity <= 0:
        raise HTTPException(status_code=400, detail="Quantity must be positive")
    state = _get_session(session_id).state
    product = _find_product(state, _coerce_id(item.product_id))
    state.dispatch("cart/add", item=product, quantity=item.quantity)
    return _cart_payload(state)


@app.post("/api/cart/open")
def open_cart(session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("ui/open_cart")
    return _cart_payload(state)


@app.post("/api/cart/close")
def close_cart(session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("ui/close_cart")
    return _cart_payload(state)


@app.delete("/api/cart")
def clear_cart(session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("cart/clear")
    return _cart_payload(state)


@app.delete("/api/cart/item/{item_id}")
def remove_from_cart(item_id: str, session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("cart/remove", item_id=_coerce_id(item_id))
    return _cart_payload(state)


@app.put("/api/cart/item/{item_id}")
def update_cart_item(item_id: str, quantity: int = Query(...), session_id: str = Query("default")):
    """Set a line's quantity; values below 1 leave the line unchanged."""
    state = _get_session(session_id).state
    state.dispatch("cart/update", item_id=_coerce_id(item_id), quantity=quantity)
    return _cart_payload(state)


@app.post("/api/cart/item/{item_id}/increment")
def increment_cart_item(item_id: str, session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("cart/increment", item_id=_coerce_id(item_id))
    return _cart_payload(state)


@app.post("/api/cart/item/{item_id}/decrement")
def decrement_cart_item(item_id: str, session_id: str = Query("default")):
    state = _get_session(session_id).state
    state.dispatch("cart/decrement", item_id=_coerce_id(item_id))
    return _cart_payload(state)


# Featured showcase

@app.get("/api/showcase")
def get_showcase(session_id: str = Query("default")):
    return _showcase_payload(_get_session(session_id).state)


@app.post("/api/showcase/{action}")
def showcase_action(action: str, session_id: str = Query("default")):
    """Carousel navigation, add-to-cart and closing the detail view."""
    actions = {
        "next": "showcase/next",
        "previous": "showcase/previous",
        "add": "showcase/add",
        "close": "showcase/close",
    }
    if action not in actions:
        raise HTTPException(status_code=404, detail="Unknown showcase action")
    state = _get_session(session_id).state
    state.dispatch(actions[action])
    return _showcase_payload(state)


@app.post("/api/showcase/quantity/{direction}")
def showcase_quantity_step(direction: str, session_id: str = Query("default")):
    if direction not in ("increment", "decrement"):
        raise HTTPException(status_code=404, detail="Unknown quantity step")
    state = _get_session(session_id).state
    state.dispatch(f"showcase/{direction}")
    return _showcase_payload(state)


@app.put("/api/showcase/quantity")
def showcase_quantity(value: str = Query(...), session_id: str = Query("default")):
    """Typed quantity; non-numeric or out-of-range text is ignored."""
    state = _get_session(session_id).state
    state.dispatch("showcase/quantity", value=value)
    return _showcase_payload(state)


@app.post("/api/showcase/{option}/{index}")
def showcase_select(option: str, index: int, session_id: str = Query("default")):
    if option not in ("color", "size", "image"):
        raise HTTPException(status_code=404, detail="Unknown showcase option")
    state = _get_session(session_id).state
    state.dispatch(f"showcase/{option}", index=index)
    return _showcase_payload(state)


# UI

@app.post("/api/theme/toggle")
def toggle_theme(session_id: str = Query("default")):
    state = _get_session(session_id).state
    return {"theme": state.dispatch("ui/toggle_theme")}


# Auth

def _auth_payload(session: StorefrontSession) -> Dict[str, Any]:
    state = session.state
    return {
        "redirect": session.redirect,
        "authenticated": state.user.is_authenticated,
        "user": state.user.user,
        "initialized": state.ui.is_initialized,
        "toasts": state.notifications.drain(),
    }


@app.post("/api/auth/callback")
def auth_callback(body: AuthCallbackRequest, session_id: str = Query("default")):
    """Outcome of a hosted login attempt; ``user`` is null when signed out."""
    session = _get_session(session_id)
    session.location = body.path
    session.widget.complete(body.user)
    return _auth_payload(session)


@app.post("/api/auth/error")
def auth_error(body: AuthErrorRequest, session_id: str = Query("default")):
    session = _get_session(session_id)
    session.widget.fail(AuthenticationError(body.message))
    return _auth_payload(session)


@app.post("/api/auth/logout")
async def auth_logout(session_id: str = Query("default")):
    session = _get_session(session_id)
    ok = await session.auth.logout()
    payload = _auth_payload(session)
    payload["logged_out"] = ok
    return payload


@app.get("/api/auth/me")
def auth_me(session_id: str = Query("default")):
    return _auth_payload(_get_session(session_id))


# Backend records

def _service(entity: str) -> RecordService:
    services = _services()
    if entity not in services:
        raise HTTPException(status_code=404, detail=f"Unknown entity: {entity}")
    return services[entity]


@app.get("/api/records/{entity}")
def list_records(entity: str):
    return {"records": _service(entity).list()}


@app.post("/api/records/{entity}")
def create_record(entity: str, data: Dict[str, Any]):
    return {"record": _service(entity).create(data)}


@app.get("/api/records/{entity}/{record_id}")
def get_record(entity: str, record_id: str):
    record = _service(entity).get_by_id(_coerce_id(record_id))
    if record is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return {"record": record}


@app.put("/api/records/{entity}/{record_id}")
def update_record(entity: str, record_id: str, data: Dict[str, Any]):
    return {"record": _service(entity).update(_coerce_id(record_id), data)}


@app.delete("/api/records/{entity}/{record_id}")
def delete_record(entity: str, record_id: str):
    return {"deleted": _service(entity).delete(_coerce_id(record_id))}


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.version}


@app.get("/{full_path:path}", response_class=HTMLResponse)
def serve_not_found(full_path: str):
    body = (
        f"<h1>{get_icon('FileQuestion')} 404 - Page Not Found</h1>"
        "<p>The page you are looking for doesn't exist or has been moved.</p>"
        "<a href='/'>Return to Home</a>"
    )
    return HTMLResponse(_page("Not Found", body), status_code=404)
