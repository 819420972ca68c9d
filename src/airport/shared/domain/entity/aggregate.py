from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    - version は楽観ロック用のトークン（未永続化なら 0）

    ドメインイベントは集約内に溜めず、各更新メソッドの戻り値として返す。
    発行は Application 層が永続化成功後に行う。
    """

    def __init__(self, id: ID, version: int = 0) -> None:
        super().__init__(id)
        if version < 0:
            raise ValueError("Version cannot be negative")
        self._version = version

    @property
    def version(self) -> int:
        return self._version

    def is_new(self) -> bool:
        """一度も永続化されていないかどうか"""
        return self._version == 0

    def _increment_version(self) -> None:
        self._version += 1
