from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import requests

from config import settings
from .errors import RecordServiceError

logger = logging.getLogger(__name__)


class RecordClient(Protocol):
    def fetch_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]: ...

    def get_record_by_id(self, table: str, record_id: Any) -> Dict[str, Any]: ...

    def create_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]: ...

    def update_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]: ...

    def delete_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]: ...


class ApperClient:
    """REST client for the hosted record backend.

    Every call returns the decoded JSON body; callers read its ``data``
    key. Transport failures and non-2xx answers raise RecordServiceError.
    """

    def __init__(
        self,
        project_id: str | None = None,
        public_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.project_id = project_id if project_id is not None else settings.apper_project_id
        self.public_key = public_key if public_key is not None else settings.apper_public_key
        self.base_url = (base_url or settings.apper_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "X-Apper-Project-Id": self.project_id,
                "Authorization": f"Bearer {self.public_key}",
            }
        )

    def _url(self, table: str, *parts: Any) -> str:
        suffix = "/".join(str(p) for p in parts)
        url = f"{self.base_url}/tables/{table}"
        return f"{url}/{suffix}" if suffix else url

    def _request(
        self,
        method: str,
        url: str,
        table: str,
        operation: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            response = self._session.request(
                method=method,
                url=url,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RecordServiceError(
                f"{operation} on {table} failed: {exc}", table=table, operation=operation
            ) from exc

        if response.status_code >= 400:
            raise RecordServiceError(
                f"{operation} on {table} returned {response.status_code} {response.reason}",
                table=table,
                operation=operation,
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            raise RecordServiceError(
                f"{operation} on {table} returned a non-JSON body",
                table=table,
                operation=operation,
                status_code=response.status_code,
            ) from exc
        return body if isinstance(body, dict) else {"data": body}

    def fetch_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", self._url(table, "query"), table, "fetch", params)

    def get_record_by_id(self, table: str, record_id: Any) -> Dict[str, Any]:
        return self._request("GET", self._url(table, "records", record_id), table, "get")

    def create_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", self._url(table, "records"), table, "create", payload)

    def update_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", self._url(table, "records"), table, "update", payload)

    def delete_record(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("DELETE", self._url(table, "records"), table, "delete", payload)

    def logout(self) -> None:
        url = f"{self.base_url}/auth/logout"
        self._request("POST", url, "auth", "logout")
