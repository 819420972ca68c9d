from collections.abc import Callable

from aws_lambda_powertools import Logger

from airport.flight.domain.entity import Flight, Passenger
from airport.flight.domain.event import FlightCreated, FlightDeleted
from airport.flight.domain.factory import FlightFactory
from airport.flight.domain.factory.flight_factory import ScheduleInput
from airport.flight.domain.repository import FlightRepository
from airport.flight.domain.value_object import FlightNumber, PassengerId
from airport.shared.domain import DomainEvent, EventPublisher, IsoDateTime
from airport.shared.domain.exception import (
    BusinessRuleViolationException,
    OptimisticLockException,
    ResourceNotFoundException,
)

logger = Logger(child=True)

DEFAULT_MAX_ATTEMPTS = 3

Mutation = Callable[[Flight], list[DomainEvent]]


class FlightService:
    """フライト管理ユースケース

    Factory と Repository を使用して集約の生成・読み込み・永続化を行う。
    更新系は「読み込み → 集約メソッド → 保存」を 1 サイクルとし、
    楽観ロックの競合時はサイクル全体をやり直す。
    イベントは保存に成功した後にだけ発行する。
    """

    def __init__(
        self,
        repository: FlightRepository,
        factory: FlightFactory,
        publisher: EventPublisher,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._repository = repository
        self._factory = factory
        self._publisher = publisher
        self._max_attempts = max_attempts

    def create_flight(
        self,
        flight_number: str,
        origin: str,
        destination: str,
        scheduled_departure: ScheduleInput | None = None,
        scheduled_arrival: ScheduleInput | None = None,
    ) -> Flight:
        """フライトを登録する

        Raises:
            BusinessRuleViolationException: 時刻の検証に失敗した場合
            DuplicateResourceException: 同じフライト番号が既に存在する場合
        """
        flight = self._factory.create_flight(
            flight_number,
            origin,
            destination,
            scheduled_departure,
            scheduled_arrival,
        )
        self._repository.save(flight)
        self._publisher.publish(
            [
                FlightCreated(
                    flight_number=flight.flight_number,
                    route=flight.route,
                    scheduled_departure=flight.scheduled_departure,
                    scheduled_arrival=flight.scheduled_arrival,
                )
            ]
        )
        logger.info("Flight created", extra={"flight_number": flight_number})
        return flight

    def list_flights(self) -> list[Flight]:
        return self._repository.find_all()

    def count_flights(self) -> int:
        return self._repository.count()

    def add_passenger_to_flight(
        self, flight_number: str, passenger: Passenger | None
    ) -> Flight:
        """乗客をフライトに追加する

        Raises:
            ResourceNotFoundException: フライトが存在しない場合
            BusinessRuleViolationException: 座席が既に割り当てられている場合
        """
        if passenger is None:
            raise BusinessRuleViolationException("Passenger cannot be null")

        logger.debug(
            "Adding passenger to flight",
            extra={"passenger_name": passenger.name, "flight_number": flight_number},
        )

        def _add(flight: Flight) -> list[DomainEvent]:
            seat = passenger.seat_assignment
            if seat is not None and flight.is_seat_taken(seat):
                raise BusinessRuleViolationException(
                    f"Seat {seat.seat_number} is already assigned"
                )
            return flight.add_passenger(passenger)

        flight, _ = self._modify(flight_number, _add)
        logger.info(
            "Successfully added passenger to flight",
            extra={"passenger_id": str(passenger.id), "flight_number": flight_number},
        )
        return flight

    def remove_passenger_from_flight(
        self, flight_number: str, passenger_id: PassengerId | str
    ) -> bool:
        """乗客をフライトから外す

        乗客が見つからない場合は保存せずに False を返す。

        Raises:
            ResourceNotFoundException: フライトが存在しない場合
        """
        logger.debug(
            "Removing passenger from flight",
            extra={"passenger_id": str(passenger_id), "flight_number": flight_number},
        )

        _, events = self._modify(
            flight_number, lambda flight: flight.withdraw_passenger(passenger_id)
        )
        removed = bool(events)
        if removed:
            logger.info(
                "Successfully removed passenger from flight",
                extra={
                    "passenger_id": str(passenger_id),
                    "flight_number": flight_number,
                },
            )
        else:
            logger.warning(
                "Passenger not found on flight",
                extra={
                    "passenger_id": str(passenger_id),
                    "flight_number": flight_number,
                },
            )
        return removed

    def get_flight_with_passengers(self, flight_number: str) -> Flight:
        """フライトを搭乗者付きで取得する

        Raises:
            ResourceNotFoundException: フライトが存在しない場合
        """
        return self._load(flight_number)

    def find_flights_by_route(self, origin: str, destination: str) -> list[Flight]:
        if not origin or not origin.strip():
            raise BusinessRuleViolationException("Origin is required")
        if not destination or not destination.strip():
            raise BusinessRuleViolationException("Destination is required")

        logger.debug(
            "Finding flights by route",
            extra={"origin": origin, "destination": destination},
        )
        return self._repository.find_by_route(origin, destination)

    def find_flights_by_departure_range(
        self, start: ScheduleInput, end: ScheduleInput
    ) -> list[Flight]:
        """出発予定時刻が start 以上 end 以下のフライトを検索する

        Raises:
            BusinessRuleViolationException: start が end より後の場合
        """
        if start is None:
            raise BusinessRuleViolationException("Start time is required")
        if end is None:
            raise BusinessRuleViolationException("End time is required")

        start_at = IsoDateTime.of(start)
        end_at = IsoDateTime.of(end)
        if start_at.is_after(end_at):
            raise BusinessRuleViolationException(
                "Start time must be before or equal to end time"
            )

        logger.debug(
            "Finding flights by departure range",
            extra={"start": str(start_at), "end": str(end_at)},
        )
        return self._repository.find_by_departure_range(start_at, end_at)

    def flight_exists(self, flight_number: str) -> bool:
        """フライトが存在するか（形式が不正な番号は存在しないものとして False）"""
        number = self._parse_flight_number(flight_number)
        return number is not None and self._repository.find_by_id(number) is not None

    def delete_flight(self, flight_number: str) -> bool:
        """フライトを削除する（搭乗者も同時に削除される）

        Returns:
            bool: 削除した場合 True、存在しなかった場合 False
        """
        number = self._parse_flight_number(flight_number)
        flight = self._repository.find_by_id(number) if number is not None else None
        if flight is None:
            return False

        self._repository.delete_by_id(number)
        self._publisher.publish(
            [
                FlightDeleted(
                    flight_number=number,
                    passenger_count=flight.get_passenger_count(),
                )
            ]
        )
        logger.info("Flight deleted", extra={"flight_number": flight_number})
        return True

    def _modify(
        self, flight_number: str, mutation: Mutation
    ) -> tuple[Flight, list[DomainEvent]]:
        """読み込み → 変更 → 保存 → イベント発行

        集約が何もイベントを返さなければ変更なしとみなして保存しない。
        """
        attempt = 1
        while True:
            flight = self._load(flight_number)
            events = mutation(flight)
            if not events:
                return flight, events

            flight.validate_flight_times()
            try:
                self._repository.save(flight)
            except OptimisticLockException:
                if attempt >= self._max_attempts:
                    logger.error(
                        "Giving up after concurrent modification",
                        extra={"flight_number": flight_number, "attempts": attempt},
                    )
                    raise
                logger.warning(
                    "Concurrent modification detected, retrying",
                    extra={"flight_number": flight_number, "attempt": attempt},
                )
                attempt += 1
                continue

            self._publisher.publish(events)
            return flight, events

    def _load(self, flight_number: str) -> Flight:
        flight = self._repository.find_by_id(self._to_flight_number(flight_number))
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {flight_number}")
        return flight

    @staticmethod
    def _parse_flight_number(flight_number: str) -> FlightNumber | None:
        try:
            return FlightNumber(flight_number)
        except ValueError:
            return None

    @staticmethod
    def _to_flight_number(flight_number: str) -> FlightNumber:
        try:
            return FlightNumber(flight_number)
        except ValueError as e:
            raise BusinessRuleViolationException(str(e)) from e
