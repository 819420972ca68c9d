from __future__ import annotations

from airport.flight.domain.value_object import PassengerId, SeatAssignment
from airport.shared.domain import Entity
from airport.shared.domain.exception import BusinessRuleViolationException


class Passenger(Entity[PassengerId]):
    """乗客エンティティ

    Flight 集約の配下にあり、Flight の外では存在しない。
    同じ便の他の乗客との座席重複チェックは Flight が行う。
    """

    def __init__(
        self,
        id: PassengerId,
        name: str,
        seat_assignment: SeatAssignment | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._seat_assignment = seat_assignment

    @classmethod
    def create(
        cls, name: str, seat_assignment: SeatAssignment | None = None
    ) -> Passenger:
        """新しい ID を採番して乗客を生成する"""
        return cls(
            id=PassengerId.generate(),
            name=name,
            seat_assignment=seat_assignment,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def seat_assignment(self) -> SeatAssignment | None:
        return self._seat_assignment

    def has_seat_assignment(self) -> bool:
        return self._seat_assignment is not None

    def update_seat_assignment(self, seat_assignment: SeatAssignment | None) -> None:
        """座席割当を置き換える"""
        if seat_assignment is None:
            raise BusinessRuleViolationException("Seat assignment cannot be null")
        self._seat_assignment = seat_assignment
