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
    flight_response,
)

logger = Logger()

service = build_flight_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト詳細取得 Lambda Handler (GET /flights/{flight_number})"""
    path_params = event.path_parameters or {}
    flight_number = path_params.get("flight_number")

    if not flight_number:
        return error_response(400, "VALIDATION_ERROR", "flight_number is required")

    logger.info("Fetching flight details", extra={"flight_number": flight_number})

    try:
        return flight_response(service.get_flight_with_passengers(flight_number))
    except Exception as e:
        return exception_response(e)
