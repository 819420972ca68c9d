from __future__ import annotations

from dataclasses import dataclass

from airport.flight.domain.value_object import (
    FlightNumber,
    PassengerId,
    Route,
    SeatAssignment,
)
from airport.shared.domain import DomainEvent, IsoDateTime


@dataclass(frozen=True)
class FlightCreated(DomainEvent):
    """フライトが登録された"""

    flight_number: FlightNumber
    route: Route
    scheduled_departure: IsoDateTime
    scheduled_arrival: IsoDateTime

    def payload(self) -> dict:
        return {
            "flight_number": str(self.flight_number),
            "origin": self.route.origin,
            "destination": self.route.destination,
            "scheduled_departure": str(self.scheduled_departure),
            "scheduled_arrival": str(self.scheduled_arrival),
        }


@dataclass(frozen=True)
class PassengerAdded(DomainEvent):
    """乗客がフライトに追加された"""

    flight_number: FlightNumber
    passenger_id: PassengerId
    passenger_name: str
    seat_assignment: SeatAssignment | None = None

    def payload(self) -> dict:
        return {
            "flight_number": str(self.flight_number),
            "passenger_id": str(self.passenger_id),
            "passenger_name": self.passenger_name,
            "seat_assignment": (
                self.seat_assignment.to_dict() if self.seat_assignment else None
            ),
        }


@dataclass(frozen=True)
class PassengerRemoved(DomainEvent):
    """乗客がフライトから外された"""

    flight_number: FlightNumber
    passenger_id: PassengerId

    def payload(self) -> dict:
        return {
            "flight_number": str(self.flight_number),
            "passenger_id": str(self.passenger_id),
        }


@dataclass(frozen=True)
class FlightDeleted(DomainEvent):
    """フライトが削除された（搭乗者も同時に消える）"""

    flight_number: FlightNumber
    passenger_count: int

    def payload(self) -> dict:
        return {
            "flight_number": str(self.flight_number),
            "passenger_count": self.passenger_count,
        }
