from __future__ import annotations

from .base import RecordService


class DestinationService(RecordService):
    table_name = "destination"
    label = "destination"
    fields = (
        "Id",
        "Name",
        "country",
        "continent",
        "description",
        "imageUrl",
        "rating",
        "reviewCount",
        "tags",
    )
