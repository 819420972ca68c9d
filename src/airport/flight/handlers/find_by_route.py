from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from airport.flight.handlers.dependencies import build_flight_service
from airport.flight.handlers.request_models import RouteQuery
from airport.flight.handlers.responses import exception_response, flight_list_response

logger = Logger()

service = build_flight_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """路線検索 Lambda Handler (GET /flights/route?origin=&destination=)"""
    logger.info("Received flight search by route")

    try:
        params = event.query_string_parameters or {}
        query = RouteQuery.model_validate(params)
        flights = service.find_flights_by_route(query.origin, query.destination)
        return flight_list_response(flights)
    except Exception as e:
        return exception_response(e)
