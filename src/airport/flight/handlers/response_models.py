from pydantic import BaseModel


class SeatAssignmentData(BaseModel):
    seat_number: str
    seat_class: str


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    id: str
    name: str
    seat_assignment: SeatAssignmentData | None = None


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_number: str
    origin: str
    destination: str
    scheduled_departure: str
    scheduled_arrival: str
    passengers: list[PassengerData]
    passenger_count: int
    created_at: str | None = None
    last_modified_at: str | None = None
    version: int


class FlightListData(BaseModel):
    """フライト一覧のレスポンスモデル"""

    flights: list[FlightData]
    count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: FlightData | FlightListData | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
