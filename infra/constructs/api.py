from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from .functions import Functions


class Api(Construct):
    """API Gateway Construct

    /flights 配下の各ルートを対応する Lambda に振り分ける。
    """

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "FlightRestApi",
            rest_api_name="Flight Management API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # /flights
        flights = self.rest_api.root.add_resource("flights")
        flights.add_method("POST", apigw.LambdaIntegration(functions.create_flight))
        flights.add_method("GET", apigw.LambdaIntegration(functions.list_flights))

        # /flights/route?origin=..&destination=..
        flights.add_resource("route").add_method(
            "GET", apigw.LambdaIntegration(functions.find_by_route)
        )

        # /flights/departures?start=..&end=..
        flights.add_resource("departures").add_method(
            "GET", apigw.LambdaIntegration(functions.find_by_departure)
        )

        # /flights/{flight_number}
        flight = flights.add_resource("{flight_number}")
        flight.add_method("GET", apigw.LambdaIntegration(functions.get_flight))
        flight.add_method("DELETE", apigw.LambdaIntegration(functions.delete_flight))

        # /flights/{flight_number}/passengers
        passengers = flight.add_resource("passengers")
        passengers.add_method(
            "POST", apigw.LambdaIntegration(functions.add_passenger)
        )

        # /flights/{flight_number}/passengers/{passenger_id}
        passengers.add_resource("{passenger_id}").add_method(
            "DELETE", apigw.LambdaIntegration(functions.remove_passenger)
        )
