from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from airport.flight.handlers.dependencies import build_flight_service
from airport.flight.handlers.request_models import CreateFlightRequest
from airport.flight.handlers.responses import exception_response, flight_response

logger = Logger()

service = build_flight_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト登録 Lambda Handler (POST /flights)"""
    logger.info("Received create flight request")

    try:
        body = event.json_body if event.body else {}
        request = CreateFlightRequest.model_validate(body)
        flight = service.create_flight(
            request.flight_number,
            request.origin,
            request.destination,
            request.scheduled_departure,
            request.scheduled_arrival,
        )
        return flight_response(flight, status_code=201)
    except Exception as e:
        return exception_response(e)
