from abc import abstractmethod

from courtside.catalog.domain.entity import Court, Sport
from courtside.catalog.domain.value_object import CourtId, SportId
from courtside.shared.domain import Repository


class CatalogRepository(Repository[Court, CourtId]):
    """コート・競技カタログのレポジトリインターフェース

    集約ルートはコート。競技は料金表としてコートと同じカタログで管理する。
    """

    def find_by_id(self, id: CourtId) -> Court | None:
        return self.find_court(id)

    @abstractmethod
    def list_courts(self) -> list[Court]:
        """全コートを登録順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_court(self, court_id: CourtId) -> Court | None:
        """コートIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def save_court(self, court: Court) -> None:
        """コートを保存する"""
        raise NotImplementedError

    @abstractmethod
    def list_sports(self) -> list[Sport]:
        """全競技を登録順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_sport(self, sport_id: SportId) -> Sport | None:
        """競技IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def save_sport(self, sport: Sport) -> None:
        """競技を保存する（同じ ID の場合は置き換え）"""
        raise NotImplementedError
