import threading
from decimal import Decimal

from courtside.catalog.domain import (
    CatalogRepository,
    Court,
    CourtId,
    DisplayName,
    Sport,
    SportId,
)
from courtside.shared.domain import Currency, Money


class InMemoryCatalogRepository(CatalogRepository):
    """プロセス内メモリに保持する CatalogRepository の具象実装

    コートと競技は少数・固定のため、永続化せずデプロイ設定から生成する。
    """

    def __init__(
        self,
        courts: list[Court] | None = None,
        sports: list[Sport] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._courts: dict[CourtId, Court] = {c.id: c for c in courts or []}
        self._sports: dict[SportId, Sport] = {s.id: s for s in sports or []}

    def list_courts(self) -> list[Court]:
        with self._lock:
            return list(self._courts.values())

    def find_court(self, court_id: CourtId) -> Court | None:
        with self._lock:
            return self._courts.get(court_id)

    def save_court(self, court: Court) -> None:
        with self._lock:
            self._courts[court.id] = court

    def list_sports(self) -> list[Sport]:
        with self._lock:
            return list(self._sports.values())

    def find_sport(self, sport_id: SportId) -> Sport | None:
        with self._lock:
            return self._sports.get(sport_id)

    def save_sport(self, sport: Sport) -> None:
        with self._lock:
            self._sports[sport.id] = sport


def default_catalog(currency: Currency | None = None) -> InMemoryCatalogRepository:
    """リファレンス環境のカタログ（コート2面、クリケット・フットボール）"""
    currency = currency or Currency.pkr()
    return InMemoryCatalogRepository(
        courts=[
            Court(CourtId("court-a"), DisplayName("Court A")),
            Court(CourtId("court-b"), DisplayName("Court B")),
        ],
        sports=[
            Sport(
                SportId("cricket"),
                DisplayName("Cricket"),
                Money(Decimal("2000"), currency),
            ),
            Sport(
                SportId("football"),
                DisplayName("Football"),
                Money(Decimal("2500"), currency),
            ),
        ],
    )
