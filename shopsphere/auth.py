"""Session bootstrap around the hosted authentication widget.

The widget calls back once per authentication attempt. The redirect
rules below decide where the visitor lands afterwards; their order
matters, so keep it as written:

success: ``redirect`` query parameter, else the current path when it is
not an auth page, else the catalog root.

failure: off auth pages, go to login; on an auth page with a
``redirect`` parameter, stay unless the path is none of the auth pages;
on an auth page, stay.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Callable, Dict, Optional, Protocol
from urllib.parse import parse_qs, urlsplit

from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

AUTH_PAGE_MARKERS = ("/login", "/signup", "/callback", "/error")
AUTH_PAGE_WORDS = ("error", "signup", "login", "callback")

SuccessCallback = Callable[[Optional[Dict[str, Any]]], None]
ErrorCallback = Callable[[Any], None]


def is_auth_page(current_path: str) -> bool:
    return any(marker in current_path for marker in AUTH_PAGE_MARKERS)


def redirect_param(current_path: str) -> Optional[str]:
    values = parse_qs(urlsplit(current_path).query).get("redirect")
    return values[0] if values else None


def success_redirect(current_path: str) -> str:
    redirect_path = redirect_param(current_path)
    if redirect_path:
        return redirect_path
    if not is_auth_page(current_path):
        if "/login" not in current_path and "/signup" not in current_path:
            return current_path
        return "/"
    return "/"


def failure_redirect(current_path: str) -> str:
    redirect_path = redirect_param(current_path)
    if not is_auth_page(current_path):
        if "/signup" in current_path:
            return f"/signup?redirect={current_path}"
        if "/login" in current_path:
            return f"/login?redirect={current_path}"
        return "/login"
    if redirect_path:
        if not any(word in current_path for word in AUTH_PAGE_WORDS):
            return f"/login?redirect={redirect_path}"
        return current_path
    return current_path


class AuthWidget(Protocol):
    def setup(
        self,
        client: Any,
        *,
        target: str,
        client_id: str,
        view: str,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None: ...

    async def logout(self) -> None: ...


class HostedAuthWidget:
    """Widget whose callbacks are fired by the web layer.

    The hosted login page posts its outcome back to the storefront, which
    calls ``complete`` or ``fail``.
    """

    def __init__(self) -> None:
        self.client: Any = None
        self.options: Dict[str, Any] = {}
        self._on_success: Optional[SuccessCallback] = None
        self._on_error: Optional[ErrorCallback] = None

    @property
    def is_configured(self) -> bool:
        return self._on_success is not None

    def setup(
        self,
        client: Any,
        *,
        target: str,
        client_id: str,
        view: str,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        self.client = client
        self.options = {"target": target, "client_id": client_id, "view": view}
        self._on_success = on_success
        self._on_error = on_error

    def complete(self, user: Optional[Dict[str, Any]]) -> None:
        if self._on_success is None:
            raise RuntimeError("Widget not configured. Call setup() first.")
        self._on_success(user)

    def fail(self, error: Any) -> None:
        if self._on_error is None:
            raise RuntimeError("Widget not configured. Call setup() first.")
        self._on_error(error)

    async def logout(self) -> None:
        if self.client is not None and hasattr(self.client, "logout"):
            await asyncio.to_thread(self.client.logout)


class AuthBootstrap:
    """Wire the widget callbacks to navigation and the user slice.

    ``location`` returns the current path including its query string;
    ``navigate`` moves the visitor; ``dispatch`` is the application
    state's mutation entry point.
    """

    def __init__(
        self,
        widget: AuthWidget,
        location: Callable[[], str],
        navigate: Callable[[str], None],
        dispatch: Callable[..., Any],
        notifier: Optional[NotificationCenter] = None,
    ) -> None:
        self.widget = widget
        self.location = location
        self.navigate = navigate
        self.dispatch = dispatch
        self.notifier = notifier or NotificationCenter()

    def start(self, client: Any, project_id: str) -> None:
        self.widget.setup(
            client,
            target="#authentication",
            client_id=project_id,
            view="both",
            on_success=self.on_success,
            on_error=self.on_error,
        )

    def on_success(self, user: Optional[Dict[str, Any]]) -> None:
        self.dispatch("ui/initialized")
        current_path = self.location()
        if user is not None:
            self.navigate(success_redirect(current_path))
            self.dispatch("user/set", user=copy.deepcopy(user))
        else:
            self.navigate(failure_redirect(current_path))
            self.dispatch("user/clear")

    def on_error(self, error: Any) -> None:
        logger.error("Authentication error: %s", error)
        self.notifier.error("Authentication failed. Please try again.")

    async def logout(self) -> bool:
        try:
            await self.widget.logout()
        except Exception as exc:
            logger.error("Logout failed: %s", exc)
            return False
        self.dispatch("user/clear")
        self.navigate("/login")
        return True

