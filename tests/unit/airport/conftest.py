from unittest.mock import MagicMock

import pytest

from airport.flight.domain.entity import Flight, Passenger
from airport.flight.domain.enum import SeatClass
from airport.flight.domain.value_object import (
    FlightNumber,
    PassengerId,
    Route,
    SeatAssignment,
)
from airport.shared.domain import IsoDateTime


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        name: str = "John Doe",
        passenger_id: str = "passenger-1",
        seat_number: str | None = None,
        seat_class: SeatClass = SeatClass.ECONOMY,
    ) -> Passenger:
        seat_assignment = (
            SeatAssignment(seat_number=seat_number, seat_class=seat_class)
            if seat_number is not None
            else None
        )
        return Passenger(
            id=PassengerId(value=passenger_id),
            name=name,
            seat_assignment=seat_assignment,
        )

    return _factory


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture"""

    def _factory(
        flight_number: str = "UA101",
        origin: str = "JFK",
        destination: str = "LAX",
        departure: str = "2030-01-01T10:00:00Z",
        arrival: str = "2030-01-01T14:00:00Z",
        passengers: list[Passenger] | None = None,
        version: int = 0,
    ) -> Flight:
        return Flight(
            id=FlightNumber(value=flight_number),
            route=Route(origin=origin, destination=destination),
            scheduled_departure=IsoDateTime.from_string(departure),
            scheduled_arrival=IsoDateTime.from_string(arrival),
            passengers=passengers,
            version=version,
        )

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_publisher():
    """イベントパブリッシャーのモックフィクスチャ"""
    return MagicMock()
