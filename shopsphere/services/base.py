from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..backend import ApperClient, RecordClient
from ..errors import RecordServiceError

logger = logging.getLogger(__name__)


class RecordService:
    """CRUD wrapper for one backend table.

    Subclasses set ``table_name``, ``fields`` and ``label``. Failures are
    logged and re-raised; ``list`` turns a missing payload into ``[]``.
    """

    table_name: ClassVar[str] = ""
    fields: ClassVar[Tuple[str, ...]] = ()
    label: ClassVar[str] = "record"

    def __init__(self, client: Optional[RecordClient] = None) -> None:
        self._client = client

    @property
    def client(self) -> RecordClient:
        if self._client is None:
            self._client = ApperClient()
        return self._client

    def query_params(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return {
            "Fields": [{"Field": {"Name": name}} for name in self.fields],
            **(params or {}),
        }

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        try:
            response = self.client.fetch_records(self.table_name, self.query_params(params))
        except RecordServiceError:
            logger.error("Error fetching %ss", self.label)
            raise
        return (response or {}).get("data") or []

    def get_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.get_record_by_id(self.table_name, record_id)
        except RecordServiceError:
            logger.error("Error fetching %s with ID %s", self.label, record_id)
            raise
        return (response or {}).get("data") or None

    def create(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.create_record(self.table_name, {"record": data})
        except RecordServiceError:
            logger.error("Error creating %s", self.label)
            raise
        return (response or {}).get("data") or None

    def update(self, record_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        payload = {"record": {"Id": record_id, **data}}
        try:
            response = self.client.update_record(self.table_name, payload)
        except RecordServiceError:
            logger.error("Error updating %s with ID %s", self.label, record_id)
            raise
        return (response or {}).get("data") or None

    def delete(self, record_id: Any) -> bool:
        try:
            self.client.delete_record(self.table_name, {"RecordIds": [record_id]})
        except RecordServiceError:
            logger.error("Error deleting %s with ID %s", self.label, record_id)
            raise
        return True
