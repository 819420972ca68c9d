from .flight_number import FlightNumber
from .passenger_id import PassengerId
from .route import Route
from .seat_assignment import SeatAssignment

__all__ = ["FlightNumber", "PassengerId", "Route", "SeatAssignment"]
