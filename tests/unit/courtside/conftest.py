import json
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from courtside.booking.domain import (
    BookingCandidate,
    Customer,
    HourRange,
    OpeningHours,
)
from courtside.booking.infrastructure import InMemoryBookingLedger
from courtside.catalog.domain import CourtId, SportId
from courtside.catalog.infrastructure import default_catalog
from courtside.shared.domain import Money

# 2024-01-10 は水曜日（その週の月曜は 2024-01-08）
BOOKING_DATE = date(2024, 1, 10)


@pytest.fixture
def booking_date():
    """全テスト共通の利用日フィクスチャ"""
    return BOOKING_DATE


@pytest.fixture
def opening_hours():
    return OpeningHours(opening_hour=6, closing_hour=23)


@pytest.fixture
def catalog():
    """リファレンス環境のカタログ（Court A/B、Cricket 2000/h、Football 2500/h）"""
    return default_catalog()


@pytest.fixture
def ledger(opening_hours):
    """メモリ上の予約台帳（テスト終了時に破棄）"""
    with InMemoryBookingLedger(opening_hours=opening_hours) as ledger:
        yield ledger


@pytest.fixture
def mock_ledger():
    """予約台帳のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_candidate():
    """BookingCandidate を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        court_id: str = "court-a",
        sport_id: str = "cricket",
        booking_date: date = BOOKING_DATE,
        start_hour: int = 9,
        hours: int = 1,
        price_per_hour: int = 2000,
        name: str = "Ahmed Khan",
        phone: str = "+92 300 1234567",
    ) -> BookingCandidate:
        return BookingCandidate(
            customer=Customer(name=name, phone=phone),
            sport_id=SportId(sport_id),
            court_id=CourtId(court_id),
            booking_date=booking_date,
            hour_range=HourRange(start_hour=start_hour, hours=hours),
            amount=Money.pkr(Decimal(price_per_hour) * hours),
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway プロキシイベントを生成する Factory fixture"""

    def _factory(body=None, path_parameters=None, query_parameters=None) -> dict:
        return {
            "httpMethod": "GET",
            "path": "/",
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body) if body is not None else None,
            "pathParameters": path_parameters,
            "queryStringParameters": query_parameters,
            "requestContext": {"requestId": "test-request"},
            "isBase64Encoded": False,
        }

    return _factory
