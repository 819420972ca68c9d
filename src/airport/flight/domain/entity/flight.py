from airport.flight.domain.entity.passenger import Passenger
from airport.flight.domain.event import PassengerAdded, PassengerRemoved
from airport.flight.domain.value_object import (
    FlightNumber,
    PassengerId,
    Route,
    SeatAssignment,
)
from airport.shared.domain import AggregateRoot, DomainEvent, IsoDateTime
from airport.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidStateException,
)


class Flight(AggregateRoot[FlightNumber]):
    """フライト（集約ルート）

    フライト番号を ID とし、搭乗者リストを所有する。
    不変条件:
    - 同じ便の乗客同士で同じ座席割当を持たない
    - 到着予定時刻は出発予定時刻より後

    コンストラクタは永続化層からの復元にも使うため検証を行わない。
    新規作成時の検証は FlightFactory、更新後の再検証は validate_flight_times が担う。
    """

    def __init__(
        self,
        id: FlightNumber,
        route: Route,
        scheduled_departure: IsoDateTime,
        scheduled_arrival: IsoDateTime,
        passengers: list[Passenger] | None = None,
        created_at: IsoDateTime | None = None,
        last_modified_at: IsoDateTime | None = None,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        self._route = route
        self._scheduled_departure = scheduled_departure
        self._scheduled_arrival = scheduled_arrival
        self._passengers: list[Passenger] = list(passengers or [])
        self._created_at = created_at
        self._last_modified_at = last_modified_at

    @property
    def flight_number(self) -> FlightNumber:
        return self.id

    @property
    def route(self) -> Route:
        return self._route

    @property
    def origin(self) -> str:
        return self._route.origin

    @property
    def destination(self) -> str:
        return self._route.destination

    @property
    def scheduled_departure(self) -> IsoDateTime:
        return self._scheduled_departure

    @property
    def scheduled_arrival(self) -> IsoDateTime:
        return self._scheduled_arrival

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        # 外部から直接リストを書き換えられないようにタプルで返す
        return tuple(self._passengers)

    @property
    def created_at(self) -> IsoDateTime | None:
        return self._created_at

    @property
    def last_modified_at(self) -> IsoDateTime | None:
        return self._last_modified_at

    def is_seat_taken(self, seat_assignment: SeatAssignment) -> bool:
        """指定の座席割当が既に他の乗客に割り当てられているか

        座席未割当の乗客同士は競合しない。
        """
        return any(
            p.seat_assignment is not None and p.seat_assignment == seat_assignment
            for p in self._passengers
        )

    def add_passenger(self, passenger: Passenger | None) -> list[DomainEvent]:
        """乗客を追加する

        座席割当がある場合は重複をチェックし、重複していれば何も追加せずに例外を送出する。
        """
        if passenger is None:
            raise BusinessRuleViolationException("Passenger cannot be null")

        seat = passenger.seat_assignment
        if seat is not None and self.is_seat_taken(seat):
            raise BusinessRuleViolationException(
                f"Seat {seat.seat_number} is already assigned"
            )

        self._passengers.append(passenger)
        return [
            PassengerAdded(
                flight_number=self.flight_number,
                passenger_id=passenger.id,
                passenger_name=passenger.name,
                seat_assignment=seat,
            )
        ]

    def withdraw_passenger(
        self, passenger_id: PassengerId | str | None
    ) -> list[DomainEvent]:
        """乗客を外し、発生したイベントを返す（見つからなければ空リスト）"""
        if passenger_id is None or not str(passenger_id).strip():
            raise BusinessRuleViolationException("Passenger ID cannot be null or empty")

        passenger = self.find_passenger(passenger_id)
        if passenger is None:
            return []

        self._passengers.remove(passenger)
        return [
            PassengerRemoved(
                flight_number=self.flight_number,
                passenger_id=passenger.id,
            )
        ]

    def remove_passenger(self, passenger_id: PassengerId | str | None) -> bool:
        """乗客を外す

        Returns:
            bool: 外した場合 True、該当の乗客がいなければ False（例外にはしない）
        """
        return bool(self.withdraw_passenger(passenger_id))

    def find_passenger(self, passenger_id: PassengerId | str) -> Passenger | None:
        target = str(passenger_id)
        return next((p for p in self._passengers if str(p.id) == target), None)

    def get_passenger_count(self) -> int:
        return len(self._passengers)

    def validate_flight_times(self) -> None:
        """到着予定時刻 > 出発予定時刻"""
        if not self._scheduled_arrival.is_after(self._scheduled_departure):
            raise InvalidStateException(
                "Scheduled arrival must be after scheduled departure"
            )

    def record_save(self, saved_at: IsoDateTime) -> None:
        """永続化成功時に監査タイムスタンプと version を更新する

        Repository からのみ呼び出される。
        """
        if self._created_at is None:
            self._created_at = saved_at
        self._last_modified_at = saved_at
        self._increment_version()
