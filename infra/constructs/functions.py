import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_events as events
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from .layers import LAYER_RUNTIME

HANDLER_PACKAGE = "airport.flight.handlers"
SERVICE_NAME = "flight-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        event_bus: events.EventBus,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)
        self._table = table
        self._event_bus = event_bus
        self._common_layer = common_layer

        self.create_flight = self._create_function(
            "CreateFlightLambda", "create_flight"
        )
        self.delete_flight = self._create_function(
            "DeleteFlightLambda", "delete_flight"
        )
        self.add_passenger = self._create_function(
            "AddPassengerLambda", "add_passenger"
        )
        self.remove_passenger = self._create_function(
            "RemovePassengerLambda", "remove_passenger"
        )

        for fn in self.write_functions:
            table.grant_read_write_data(fn)
            event_bus.grant_put_events_to(fn)

        self.list_flights = self._create_function("ListFlightsLambda", "list_flights")
        self.get_flight = self._create_function("GetFlightLambda", "get_flight")
        self.find_by_route = self._create_function(
            "FindFlightsByRouteLambda", "find_by_route"
        )
        self.find_by_departure = self._create_function(
            "FindFlightsByDepartureLambda", "find_by_departure"
        )

        for fn in self.read_functions:
            table.grant_read_data(fn)

    @property
    def write_functions(self) -> list[_lambda.Function]:
        return [
            self.create_flight,
            self.delete_flight,
            self.add_passenger,
            self.remove_passenger,
        ]

    @property
    def read_functions(self) -> list[_lambda.Function]:
        return [
            self.list_flights,
            self.get_flight,
            self.find_by_route,
            self.find_by_departure,
        ]

    def _create_function(self, id: str, module: str) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=LAYER_RUNTIME,
            handler=f"{HANDLER_PACKAGE}.{module}.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "EVENT_BUS_NAME": self._event_bus.event_bus_name,
                "FLIGHT_SAVE_MAX_ATTEMPTS": "3",
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
