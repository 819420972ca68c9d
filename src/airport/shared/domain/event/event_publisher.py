from abc import ABC, abstractmethod
from collections.abc import Sequence

from .domain_event import DomainEvent


class EventPublisher(ABC):
    """ドメインイベント発行のインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def publish(self, events: Sequence[DomainEvent]) -> None:
        """イベントを発行する"""
        raise NotImplementedError
