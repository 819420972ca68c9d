from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True, order=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーン情報のない日時は UTC とみなし、内部では常に UTC で保持する。
    文字列表現はマイクロ秒まで固定桁で出力する。辞書順が時刻順と一致するため、
    DynamoDB のソートキーにそのまま使える。
    """

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise ValueError(f"Invalid datetime: {self.value!r}")
        if self.value.tzinfo is None:
            normalized = self.value.replace(tzinfo=timezone.utc)
        else:
            normalized = self.value.astimezone(timezone.utc)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def of(cls, value: datetime | str | IsoDateTime) -> IsoDateTime:
        """datetime / 文字列 / IsoDateTime のいずれからでも生成する"""
        if isinstance(value, IsoDateTime):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value=value)

    @classmethod
    def now(cls) -> IsoDateTime:
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat(timespec="microseconds")

    def plus_hours(self, hours: int) -> IsoDateTime:
        return IsoDateTime(value=self.value + timedelta(hours=hours))

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value
