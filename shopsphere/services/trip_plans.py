from __future__ import annotations

from .base import RecordService


class TripPlanService(RecordService):
    table_name = "trip_plan1"
    label = "trip plan"
    fields = ("Id", "Name", "trip_name", "created_at")
