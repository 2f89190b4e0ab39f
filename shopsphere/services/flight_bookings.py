from __future__ import annotations

from .base import RecordService


class FlightBookingService(RecordService):
    table_name = "flight_booking"
    label = "flight booking"
    fields = (
        "Id",
        "Name",
        "origin",
        "destination",
        "depart_date",
        "return_date",
        "passengers",
        "trip_type",
        "flight_number",
        "airline",
        "departure_time",
        "arrival_time",
        "price",
        "booking_reference",
    )
