from datetime import datetime

from airport.flight.domain.entity import Flight
from airport.flight.domain.value_object import FlightNumber, Route
from airport.shared.domain import IsoDateTime
from airport.shared.domain.exception import BusinessRuleViolationException

ScheduleInput = datetime | str | IsoDateTime

DEFAULT_DEPARTURE_OFFSET_HOURS = 2
DEFAULT_ARRIVAL_OFFSET_HOURS = 4


class FlightFactory:
    """フライト集約のファクトリ

    - プリミティブ型から Value Object への変換
    - 出発・到着時刻の前後関係と「過去の出発」の検証
    - 初期状態（搭乗者なし・未永続化）の設定
    """

    def create_flight(
        self,
        flight_number: str,
        origin: str,
        destination: str,
        scheduled_departure: ScheduleInput | None = None,
        scheduled_arrival: ScheduleInput | None = None,
    ) -> Flight:
        """新規フライトを生成する

        出発・到着時刻を省略した場合は、出発 = 現在 + 2時間、到着 = 現在 + 4時間 とする。

        Raises:
            BusinessRuleViolationException: 出発が到着以降、または出発が過去の場合
        """
        if scheduled_departure is None and scheduled_arrival is None:
            now = IsoDateTime.now()
            departure = now.plus_hours(DEFAULT_DEPARTURE_OFFSET_HOURS)
            arrival = now.plus_hours(DEFAULT_ARRIVAL_OFFSET_HOURS)
        elif scheduled_departure is None or scheduled_arrival is None:
            raise BusinessRuleViolationException(
                "Scheduled departure and arrival must be given together"
            )
        else:
            departure = IsoDateTime.of(scheduled_departure)
            arrival = IsoDateTime.of(scheduled_arrival)

        if not departure.is_before(arrival):
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

        if departure.is_before(IsoDateTime.now()):
            raise BusinessRuleViolationException("Cannot schedule flight in the past")

        return Flight(
            id=FlightNumber(flight_number),
            route=Route(origin=origin, destination=destination),
            scheduled_departure=departure,
            scheduled_arrival=arrival,
        )
