from aws_cdk import aws_events as events
from constructs import Construct


class Events(Construct):
    """ドメインイベント用の EventBridge カスタムバス"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.event_bus = events.EventBus(
            self,
            "FlightEventBus",
            event_bus_name="flight-management-events",
        )
