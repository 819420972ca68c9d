import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from airport.flight.domain.entity import Flight, Passenger
from airport.flight.domain.repository import FlightRepository
from airport.flight.domain.value_object import (
    FlightNumber,
    PassengerId,
    Route,
    SeatAssignment,
)
from airport.shared.domain import IsoDateTime
from airport.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)

ENTITY_TYPE = "FLIGHT"
METADATA_SK = "METADATA"
FLIGHTS_GSI = "GSI1"
ROUTE_GSI = "GSI2"
ALL_FLIGHTS_PK = "FLIGHTS"


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    1 フライト = 1 アイテム。搭乗者はアイテム内のリストとして埋め込む。
    - GSI1: 全フライトを出発時刻順に並べる（一覧・件数・出発時刻範囲検索）
    - GSI2: 路線ごとに出発時刻順に並べる（路線検索）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, flight: Flight) -> Flight:
        """フライトを保存する

        新規作成時はフライト番号の重複を、更新時は version の一致を条件に書き込む。
        """
        saved_at = IsoDateTime.now()
        item = self._to_item(flight, saved_at)

        if flight.is_new():
            condition = Attr("PK").not_exists()
        else:
            condition = Attr("version").eq(flight.version)

        try:
            self.table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                raise
            if flight.is_new():
                raise DuplicateResourceException(
                    f"Flight already exists: {flight.flight_number}"
                ) from e
            raise OptimisticLockException(
                f"Flight version conflict: "
                f"expected {flight.version}, "
                f"flight_number={flight.flight_number}"
            ) from e

        flight.record_save(saved_at)
        return flight

    def find_by_id(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索"""
        response = self.table.get_item(
            Key=self._key(flight_number),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def delete_by_id(self, flight_number: FlightNumber) -> None:
        self.table.delete_item(Key=self._key(flight_number))

    def find_all(self) -> list[Flight]:
        items = self._query_all(
            IndexName=FLIGHTS_GSI,
            KeyConditionExpression=Key("GSI1PK").eq(ALL_FLIGHTS_PK),
        )
        return [self._to_entity(item) for item in items]

    def find_by_route(self, origin: str, destination: str) -> list[Flight]:
        items = self._query_all(
            IndexName=ROUTE_GSI,
            KeyConditionExpression=Key("GSI2PK").eq(
                self._route_key(origin, destination)
            ),
        )
        return [self._to_entity(item) for item in items]

    def find_by_departure_range(
        self, start: IsoDateTime, end: IsoDateTime
    ) -> list[Flight]:
        # BETWEEN は両端を含む
        items = self._query_all(
            IndexName=FLIGHTS_GSI,
            KeyConditionExpression=Key("GSI1PK").eq(ALL_FLIGHTS_PK)
            & Key("GSI1SK").between(str(start), str(end)),
        )
        return [self._to_entity(item) for item in items]

    def count(self) -> int:
        kwargs: dict = {
            "IndexName": FLIGHTS_GSI,
            "KeyConditionExpression": Key("GSI1PK").eq(ALL_FLIGHTS_PK),
            "Select": "COUNT",
        }
        total = 0
        while True:
            response = self.table.query(**kwargs)
            total += response.get("Count", 0)
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return total
            kwargs["ExclusiveStartKey"] = last_key

    def _query_all(self, **kwargs) -> list[dict]:
        """LastEvaluatedKey をたどって全ページ分のアイテムを取得する"""
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    @staticmethod
    def _key(flight_number: FlightNumber) -> dict:
        return {"PK": f"FLIGHT#{flight_number}", "SK": METADATA_SK}

    @staticmethod
    def _route_key(origin: str, destination: str) -> str:
        return f"ROUTE#{origin}#{destination}"

    def _to_item(self, flight: Flight, saved_at: IsoDateTime) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する

        監査タイムスタンプと version は保存後の値で書き込む。
        """
        departure = str(flight.scheduled_departure)
        return {
            **self._key(flight.flight_number),
            "entity_type": ENTITY_TYPE,
            "flightNumber": str(flight.flight_number),
            "origin": flight.origin,
            "destination": flight.destination,
            "scheduledDeparture": departure,
            "scheduledArrival": str(flight.scheduled_arrival),
            "passengers": [
                {
                    "id": str(p.id),
                    "name": p.name,
                    "seatAssignment": (
                        p.seat_assignment.to_dict() if p.seat_assignment else None
                    ),
                }
                for p in flight.passengers
            ],
            "createdAt": str(flight.created_at or saved_at),
            "lastModifiedAt": str(saved_at),
            "version": flight.version + 1,
            "GSI1PK": ALL_FLIGHTS_PK,
            "GSI1SK": departure,
            "GSI2PK": self._route_key(flight.origin, flight.destination),
            "GSI2SK": departure,
        }

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            id=FlightNumber(value=item["flightNumber"]),
            route=Route(origin=item["origin"], destination=item["destination"]),
            scheduled_departure=IsoDateTime.from_string(item["scheduledDeparture"]),
            scheduled_arrival=IsoDateTime.from_string(item["scheduledArrival"]),
            passengers=[
                Passenger(
                    id=PassengerId(value=p["id"]),
                    name=p["name"],
                    seat_assignment=(
                        SeatAssignment.from_dict(p["seatAssignment"])
                        if p.get("seatAssignment")
                        else None
                    ),
                )
                for p in item.get("passengers", [])
            ],
            created_at=self._optional_datetime(item.get("createdAt")),
            last_modified_at=self._optional_datetime(item.get("lastModifiedAt")),
            version=int(item.get("version", 0)),
        )

    @staticmethod
    def _optional_datetime(value: str | None) -> IsoDateTime | None:
        return IsoDateTime.from_string(value) if value else None
