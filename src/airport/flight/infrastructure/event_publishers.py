import json
import os
from collections.abc import Sequence

import boto3
from aws_lambda_powertools import Logger

from airport.shared.domain import DomainEvent, EventPublisher

logger = Logger(child=True)

EVENT_SOURCE = "airport.flight"

# PutEvents 1 回あたりのエントリ上限
MAX_ENTRIES_PER_REQUEST = 10


class EventPublishError(Exception):
    """EventBridge への送信に一部または全部失敗した場合"""

    pass


class EventBridgeEventPublisher(EventPublisher):
    """EventBridge にドメインイベントを送信する EventPublisher の具象実装"""

    def __init__(self, event_bus_name: str | None = None) -> None:
        self.event_bus_name = event_bus_name or os.getenv("EVENT_BUS_NAME")
        self.client = boto3.client("events")

    def publish(self, events: Sequence[DomainEvent]) -> None:
        entries = [self._to_entry(event) for event in events]
        for i in range(0, len(entries), MAX_ENTRIES_PER_REQUEST):
            batch = entries[i : i + MAX_ENTRIES_PER_REQUEST]
            response = self.client.put_events(Entries=batch)
            failed = response.get("FailedEntryCount", 0)
            if failed:
                raise EventPublishError(
                    f"Failed to publish {failed} of {len(batch)} events"
                )

    def _to_entry(self, event: DomainEvent) -> dict:
        return {
            "Source": EVENT_SOURCE,
            "DetailType": event.event_type,
            "Detail": json.dumps(event.to_dict(), default=str),
            "EventBusName": self.event_bus_name,
        }


class LoggingEventPublisher(EventPublisher):
    """イベントバスが未設定の環境向け。イベントをログに出力するだけ"""

    def publish(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            logger.info("Domain event", extra=event.to_dict())


def build_event_publisher() -> EventPublisher:
    """EVENT_BUS_NAME が設定されていれば EventBridge、なければログ出力を使う"""
    if os.getenv("EVENT_BUS_NAME"):
        return EventBridgeEventPublisher()
    return LoggingEventPublisher()
