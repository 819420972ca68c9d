from __future__ import annotations

from dataclasses import dataclass

from airport.flight.domain.enum import SeatClass


@dataclass(frozen=True)
class SeatAssignment:
    """座席割当（Value Object）

    座席番号 + 座席クラス。両方が一致すれば同一とみなされる。
    座席番号の書式チェックは入力バリデーション層（リクエストモデル）で行う。
    """

    seat_number: str
    seat_class: SeatClass

    def __post_init__(self) -> None:
        # 文字列で渡された場合も SeatClass に揃える（未知のクラスは ValueError）
        object.__setattr__(self, "seat_class", SeatClass(self.seat_class))

    def __str__(self) -> str:
        return f"{self.seat_number} ({self.seat_class.value})"

    def is_economy(self) -> bool:
        return self.seat_class == SeatClass.ECONOMY

    def is_business(self) -> bool:
        return self.seat_class == SeatClass.BUSINESS

    def is_first_class(self) -> bool:
        return self.seat_class == SeatClass.FIRST_CLASS

    def to_dict(self) -> dict:
        return {"seatNumber": self.seat_number, "seatClass": self.seat_class.value}

    @classmethod
    def from_dict(cls, data: dict) -> SeatAssignment:
        return cls(seat_number=data["seatNumber"], seat_class=data["seatClass"])
