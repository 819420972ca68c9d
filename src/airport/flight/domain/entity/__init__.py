from .flight import Flight
from .passenger import Passenger

__all__ = ["Flight", "Passenger"]
