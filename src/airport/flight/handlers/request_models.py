from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# snake_case / camelCase どちらのキーでも受け付ける
_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


class CreateFlightRequest(BaseModel):
    """フライト登録リクエストスキーマ

    出発・到着時刻を省略した場合は、出発 = 現在 + 2時間、到着 = 現在 + 4時間 となる。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "flight_number": "UA101",
                    "origin": "JFK",
                    "destination": "LAX",
                    "scheduled_departure": "2030-01-01T10:00:00Z",
                    "scheduled_arrival": "2030-01-01T14:00:00Z",
                }
            ]
        },
    )

    flight_number: str = Field(
        ...,
        min_length=2,
        max_length=10,
        description="フライト番号",
        examples=["UA101", "AA303"],
    )
    origin: str = Field(..., min_length=3, max_length=50, description="出発地")
    destination: str = Field(..., min_length=3, max_length=50, description="到着地")
    scheduled_departure: datetime | None = Field(
        default=None, description="出発予定時刻（ISO 8601形式）"
    )
    scheduled_arrival: datetime | None = Field(
        default=None, description="到着予定時刻（ISO 8601形式）"
    )

    @field_validator("flight_number", "origin", "destination")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class AddPassengerRequest(BaseModel):
    """乗客追加リクエストスキーマ

    座席番号と座席クラスは両方指定するか、両方省略する。
    """

    model_config = _MODEL_CONFIG

    name: str = Field(..., min_length=2, max_length=100, description="乗客名")
    seat_number: str | None = Field(
        default=None,
        pattern=r"^[1-9][0-9]?[A-F]$",
        description="座席番号（例: 12A, 5B）",
        examples=["12A"],
    )
    seat_class: str | None = Field(
        default=None,
        pattern=r"^(Economy|Business|First Class)$",
        description="座席クラス",
        examples=["Economy", "Business", "First Class"],
    )

    @field_validator("name")
    @classmethod
    def check_name_not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @model_validator(mode="after")
    def check_seat_pair(self) -> "AddPassengerRequest":
        if (self.seat_number is None) != (self.seat_class is None):
            raise ValueError("seat_number and seat_class must be given together")
        return self


class RouteQuery(BaseModel):
    """路線検索クエリ"""

    origin: str = Field(..., min_length=3, max_length=50)
    destination: str = Field(..., min_length=3, max_length=50)


class DepartureRangeQuery(BaseModel):
    """出発時刻範囲検索クエリ（両端を含む）"""

    start: datetime
    end: datetime
