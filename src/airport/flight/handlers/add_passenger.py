from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from airport.flight.domain.entity import Passenger
from airport.flight.domain.value_object import SeatAssignment
from airport.flight.handlers.dependencies import build_flight_service
from airport.flight.handlers.request_models import AddPassengerRequest
from airport.flight.handlers.responses import (
    error_response,
    exception_response,
    flight_response,
)

logger = Logger()

service = build_flight_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客追加 Lambda Handler (POST /flights/{flight_number}/passengers)"""
    path_params = event.path_parameters or {}
    flight_number = path_params.get("flight_number")

    if not flight_number:
        return error_response(400, "VALIDATION_ERROR", "flight_number is required")

    logger.info(
        "Received add passenger request",
        extra={"flight_number": flight_number},
    )

    try:
        body = event.json_body if event.body else {}
        request = AddPassengerRequest.model_validate(body)
        passenger = _to_passenger(request)
        flight = service.add_passenger_to_flight(flight_number, passenger)
        return flight_response(flight)
    except Exception as e:
        return exception_response(e)


def _to_passenger(request: AddPassengerRequest) -> Passenger:
    """リクエストボディから Passenger を構築する"""
    seat_assignment = None
    if request.seat_number is not None and request.seat_class is not None:
        seat_assignment = SeatAssignment(
            seat_number=request.seat_number,
            seat_class=request.seat_class,
        )
    return Passenger.create(name=request.name, seat_assignment=seat_assignment)
