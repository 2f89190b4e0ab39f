from __future__ import annotations

from typing import Dict, Optional, Type

from ..backend import RecordClient
from .base import RecordService
from .destination_guides import DestinationGuideService
from .destinations import DestinationService
from .flight_bookings import FlightBookingService
from .passengers import PassengerService
from .trip_plans import TripPlanService

SERVICE_TYPES: Dict[str, Type[RecordService]] = {
    "destinations": DestinationService,
    "destination-guides": DestinationGuideService,
    "flight-bookings": FlightBookingService,
    "passengers": PassengerService,
    "trip-plans": TripPlanService,
}


def build_services(client: Optional[RecordClient] = None) -> Dict[str, RecordService]:
    """Instantiate every entity service, sharing one client."""

    return {slug: service_type(client) for slug, service_type in SERVICE_TYPES.items()}
