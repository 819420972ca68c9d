from enum import Enum


class SeatClass(str, Enum):
    """座席クラス"""

    ECONOMY = "Economy"
    BUSINESS = "Business"
    FIRST_CLASS = "First Class"
