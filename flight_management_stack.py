from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Events, Functions, Layers


class FlightManagementStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")
        events = Events(self, "Events")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            event_bus=events.event_bus,
            common_layer=layers.common_layer,
        )

        api = Api(self, "Api", functions=fns)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
