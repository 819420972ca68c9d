import os

from airport.flight.applications.flight_service import (
    DEFAULT_MAX_ATTEMPTS,
    FlightService,
)
from airport.flight.domain.factory import FlightFactory
from airport.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from airport.flight.infrastructure.event_publishers import build_event_publisher


def build_flight_service() -> FlightService:
    """依存関係の組み立て（Composition Root）"""
    return FlightService(
        repository=DynamoDBFlightRepository(),
        factory=FlightFactory(),
        publisher=build_event_publisher(),
        max_attempts=int(
            os.getenv("FLIGHT_SAVE_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
        ),
    )
