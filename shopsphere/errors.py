from __future__ import annotations

from typing import Optional


class ShopSphereError(Exception):
    """Base class for storefront errors."""


class RecordServiceError(ShopSphereError):
    """A backend record call failed (network, HTTP status or payload)."""

    def __init__(
        self,
        message: str,
        table: str = "",
        operation: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.operation = operation
        self.status_code = status_code


class AuthenticationError(ShopSphereError):
    """The authentication widget reported a failure."""
