from .flight_factory import FlightFactory

__all__ = ["FlightFactory"]
