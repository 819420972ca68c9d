from .flight_events import (
    FlightCreated,
    FlightDeleted,
    PassengerAdded,
    PassengerRemoved,
)

__all__ = ["FlightCreated", "FlightDeleted", "PassengerAdded", "PassengerRemoved"]
