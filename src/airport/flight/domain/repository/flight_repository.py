from abc import abstractmethod

from airport.flight.domain.entity import Flight
from airport.flight.domain.value_object import FlightNumber
from airport.shared.domain import IsoDateTime, Repository


class FlightRepository(Repository[Flight, FlightNumber]):
    """フライトリポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    save は version による楽観ロックを行い、監査タイムスタンプを設定する。
    """

    @abstractmethod
    def save(self, flight: Flight) -> Flight:
        """フライトを保存する（新規なら作成、既存なら version を確認して更新）

        Raises:
            DuplicateResourceException: 同じフライト番号が既に存在する場合（新規作成時）
            OptimisticLockException: 保存済みの version が期待値と異なる場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, flight_number: FlightNumber) -> None:
        """フライト番号で削除する（搭乗者も同時に削除される）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """全フライトを出発時刻順で取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_route(self, origin: str, destination: str) -> list[Flight]:
        """出発地・到着地が一致するフライトを検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_departure_range(
        self, start: IsoDateTime, end: IsoDateTime
    ) -> list[Flight]:
        """出発予定時刻が start 以上 end 以下のフライトを検索する"""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """フライト件数を返す"""
        raise NotImplementedError
