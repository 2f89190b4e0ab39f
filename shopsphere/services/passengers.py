from __future__ import annotations

from .base import RecordService


class PassengerService(RecordService):
    # backend table carries a numeric suffix
    table_name = "passenger1"
    label = "passenger"
    fields = (
        "Id",
        "Name",
        "first_name",
        "last_name",
        "dob",
        "passport_number",
        "flight_booking",
    )
