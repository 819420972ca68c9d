from aws_lambda_powertools import Logger
from pydantic import ValidationError

from airport.flight.domain.entity import Flight
from airport.flight.handlers.response_models import (
    ErrorResponse,
    FlightData,
    FlightListData,
    PassengerData,
    SeatAssignmentData,
    SuccessResponse,
)
from airport.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    InvalidStateException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from airport.shared.utils import api_response

logger = Logger(child=True)


def to_flight_data(flight: Flight) -> FlightData:
    """Entity をレスポンス形式に変換"""
    return FlightData(
        flight_number=str(flight.flight_number),
        origin=flight.origin,
        destination=flight.destination,
        scheduled_departure=str(flight.scheduled_departure),
        scheduled_arrival=str(flight.scheduled_arrival),
        passengers=[
            PassengerData(
                id=str(p.id),
                name=p.name,
                seat_assignment=(
                    SeatAssignmentData(
                        seat_number=p.seat_assignment.seat_number,
                        seat_class=p.seat_assignment.seat_class.value,
                    )
                    if p.seat_assignment
                    else None
                ),
            )
            for p in flight.passengers
        ],
        passenger_count=flight.get_passenger_count(),
        created_at=str(flight.created_at) if flight.created_at else None,
        last_modified_at=(
            str(flight.last_modified_at) if flight.last_modified_at else None
        ),
        version=flight.version,
    )


def flight_response(flight: Flight, status_code: int = 200) -> dict:
    body = SuccessResponse(data=to_flight_data(flight)).model_dump(exclude_none=True)
    return api_response(status_code, body)


def flight_list_response(flights: list[Flight]) -> dict:
    data = FlightListData(
        flights=[to_flight_data(f) for f in flights],
        count=len(flights),
    )
    return api_response(200, SuccessResponse(data=data).model_dump(exclude_none=True))


def message_response(message: str, status_code: int = 200) -> dict:
    body = SuccessResponse(message=message).model_dump(exclude_none=True)
    return api_response(status_code, body)


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def exception_response(e: Exception) -> dict:
    """例外を HTTP ステータスにマッピングしたエラーレスポンスを生成

    ValidationError は ValueError のサブクラスなので先に判定する。
    """
    if isinstance(e, ValidationError):
        logger.warning("Validation error", extra={"errors": e.errors()})
        return error_response(
            400,
            "VALIDATION_ERROR",
            "Invalid input data",
            details=e.errors(include_url=False, include_context=False),
        )
    if isinstance(e, ResourceNotFoundException):
        return error_response(404, "NOT_FOUND", str(e))
    if isinstance(e, (BusinessRuleViolationException, ValueError)):
        logger.warning("Business rule violation", extra={"reason": str(e)})
        return error_response(400, "BUSINESS_RULE_VIOLATION", str(e))
    if isinstance(e, (DuplicateResourceException, OptimisticLockException)):
        return error_response(409, "CONFLICT", str(e))
    if isinstance(e, InvalidStateException):
        logger.error("Flight is in an invalid state", extra={"reason": str(e)})
        return error_response(409, "INVALID_STATE", str(e))

    logger.exception("An unexpected error occurred")
    return error_response(500, "INTERNAL_ERROR", "Internal server error")
