from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from airport.flight.handlers.dependencies import build_flight_service
from airport.flight.handlers.responses import (
    error_response,
    exception_response,
    message_response,
)

logger = Logger()

service = build_flight_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客削除 Lambda Handler

    DELETE /flights/{flight_number}/passengers/{passenger_id}
    """
    path_params = event.path_parameters or {}
    flight_number = path_params.get("flight_number")
    passenger_id = path_params.get("passenger_id")

    if not flight_number or not passenger_id:
        return error_response(
            400, "VALIDATION_ERROR", "flight_number and passenger_id are required"
        )

    logger.info(
        "Received remove passenger request",
        extra={"flight_number": flight_number, "passenger_id": passenger_id},
    )

    try:
        if not service.remove_passenger_from_flight(flight_number, passenger_id):
            return error_response(
                404,
                "NOT_FOUND",
                f"Passenger {passenger_id} not found on flight {flight_number}",
            )
        return message_response("Passenger removed successfully")
    except Exception as e:
        return exception_response(e)
