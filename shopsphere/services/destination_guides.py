from __future__ import annotations

from .base import RecordService


class DestinationGuideService(RecordService):
    """Guides saved for offline reading, one per destination."""

    table_name = "destination_guide"
    label = "destination guide"
    fields = ("Id", "Name", "destination", "country", "offline_saved_at")
