"""Lambda 実行環境内で共有する依存オブジェクト

ハンドラはモジュール読み込み時にここから台帳・カタログを取得する。
同一プロセス内のハンドラは同じ台帳インスタンスを共有する。
"""

from functools import lru_cache

from courtside.booking.domain import BookingFactory, BookingLedger, OpeningHours
from courtside.booking.domain.service.availability import AvailabilityChecker
from courtside.booking.infrastructure import build_ledger, opening_hours_from
from courtside.catalog.domain import CatalogRepository
from courtside.catalog.infrastructure import default_catalog
from courtside.shared.config import get_settings
from courtside.shared.domain import Currency


def get_opening_hours() -> OpeningHours:
    return opening_hours_from(get_settings())


@lru_cache
def get_catalog() -> CatalogRepository:
    return default_catalog(Currency(get_settings().currency))


@lru_cache
def get_ledger() -> BookingLedger:
    return build_ledger(get_settings())


def get_booking_factory() -> BookingFactory:
    return BookingFactory(opening_hours=get_opening_hours())


def get_availability_checker() -> AvailabilityChecker:
    return AvailabilityChecker(
        ledger=get_ledger(),
        catalog=get_catalog(),
        opening_hours=get_opening_hours(),
    )


def reset() -> None:
    """キャッシュ済みの設定・台帳・カタログを破棄する（テスト用）"""
    get_settings.cache_clear()
    get_catalog.cache_clear()
    get_ledger.cache_clear()
