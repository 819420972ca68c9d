from .entity import Flight, Passenger
from .enum import SeatClass
from .event import FlightCreated, FlightDeleted, PassengerAdded, PassengerRemoved
from .factory import FlightFactory
from .repository import FlightRepository
from .value_object import FlightNumber, PassengerId, Route, SeatAssignment

__all__ = [
    "Flight",
    "Passenger",
    "SeatClass",
    "SeatAssignment",
    "FlightNumber",
    "PassengerId",
    "Route",
    "FlightCreated",
    "FlightDeleted",
    "PassengerAdded",
    "PassengerRemoved",
    "FlightFactory",
    "FlightRepository",
]
