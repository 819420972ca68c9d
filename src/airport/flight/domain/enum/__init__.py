from .seat_class import SeatClass

__all__ = ["SeatClass"]
