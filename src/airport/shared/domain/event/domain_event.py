from dataclasses import dataclass, field

from airport.shared.domain.value_object import IsoDateTime


@dataclass(frozen=True)
class DomainEvent:
    """ドメインイベント基底クラス

    集約の更新メソッドが戻り値として返す不変の値。
    発行（EventBridge への送信など）は Application 層の責務。
    """

    occurred_at: IsoDateTime = field(default_factory=IsoDateTime.now, kw_only=True)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> dict:
        """イベント固有の属性を返す（サブクラスで上書きする）"""
        return {}

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type,
            "occurred_at": str(self.occurred_at),
            **self.payload(),
        }
