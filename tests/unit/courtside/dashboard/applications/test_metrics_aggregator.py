from datetime import date
from decimal import Decimal

import pytest

from courtside.booking.domain import BookingStatus
from courtside.catalog.domain import CourtId, SportId
from courtside.dashboard.applications import MetricsAggregator
from courtside.shared.domain import Currency, Money

TODAY = date(2024, 1, 10)  # 水曜日


class TestMetricsAggregator:
    @pytest.fixture
    def aggregator(self, ledger, catalog, opening_hours):
        return MetricsAggregator(
            ledger=ledger,
            catalog=catalog,
            opening_hours=opening_hours,
            currency=Currency.pkr(),
            clock=lambda: TODAY,
        )

    @pytest.fixture
    def seeded_ledger(self, ledger, create_candidate):
        """当日・今週・今月・先月の予約を登録した台帳"""
        # 当日: Court A クリケット 2時間
        ledger.create(create_candidate(booking_date=TODAY, start_hour=9, hours=2))
        # 今週の月曜: Court B フットボール 1時間（利用済み）
        completed = ledger.create(
            create_candidate(
                court_id="court-b",
                sport_id="football",
                booking_date=date(2024, 1, 8),
                price_per_hour=2500,
            )
        )
        ledger.set_status(completed.id, BookingStatus.COMPLETED)
        # 当日: Court B フットボール 2時間（キャンセル済み）
        cancelled = ledger.create(
            create_candidate(
                court_id="court-b",
                sport_id="football",
                booking_date=TODAY,
                hours=2,
                price_per_hour=2500,
            )
        )
        ledger.set_status(cancelled.id, BookingStatus.CANCELLED)
        # 先週（同じ月、直近7日間の外）
        ledger.create(create_candidate(booking_date=date(2024, 1, 3)))
        # 先月
        ledger.create(create_candidate(booking_date=date(2023, 12, 31)))
        return ledger

    def test_revenue_excludes_cancelled(self, aggregator, seeded_ledger):
        metrics = aggregator.aggregate()

        assert metrics.as_of == TODAY
        assert metrics.revenue.today == Money.pkr(4000)
        assert metrics.revenue.week == Money.pkr(6500)
        assert metrics.revenue.month == Money.pkr(8500)
        assert metrics.total_bookings == 4

    def test_court_occupancy(self, aggregator, seeded_ledger):
        metrics = aggregator.aggregate()

        # 営業時間 17時間 × 7日 = 119時間
        occupancy = {o.court_id: o.percentage for o in metrics.occupancy}
        assert occupancy == {CourtId("court-a"): 2, CourtId("court-b"): 1}
        assert [o.court_name for o in metrics.occupancy] == ["Court A", "Court B"]

    def test_revenue_by_day(self, aggregator, seeded_ledger):
        metrics = aggregator.aggregate()

        series = [(d.day, d.revenue.amount) for d in metrics.revenue_by_day]
        assert series == [
            (date(2024, 1, 4), Decimal("0")),
            (date(2024, 1, 5), Decimal("0")),
            (date(2024, 1, 6), Decimal("0")),
            (date(2024, 1, 7), Decimal("0")),
            (date(2024, 1, 8), Decimal("2500")),
            (date(2024, 1, 9), Decimal("0")),
            (date(2024, 1, 10), Decimal("4000")),
        ]

    def test_bookings_by_day(self, aggregator, seeded_ledger):
        metrics = aggregator.aggregate()

        by_day = {d.day: d.counts for d in metrics.bookings_by_day}
        assert len(by_day) == 7
        assert by_day[TODAY] == {CourtId("court-a"): 1, CourtId("court-b"): 0}
        assert by_day[date(2024, 1, 8)] == {
            CourtId("court-a"): 0,
            CourtId("court-b"): 1,
        }

    def test_sport_shares(self, aggregator, seeded_ledger):
        metrics = aggregator.aggregate()

        shares = {s.sport_id: s.percentage for s in metrics.sport_shares}
        assert shares == {SportId("cricket"): 75, SportId("football"): 25}

    def test_sport_shares_round_half_up(self, aggregator, ledger, create_candidate):
        for hour in range(6, 13):
            ledger.create(create_candidate(start_hour=hour))
        ledger.create(create_candidate(sport_id="football", court_id="court-b"))

        metrics = aggregator.aggregate()

        # 7/8 = 87.5%, 1/8 = 12.5%
        shares = {s.sport_id: s.percentage for s in metrics.sport_shares}
        assert shares == {SportId("cricket"): 88, SportId("football"): 13}

    def test_empty_ledger(self, aggregator):
        metrics = aggregator.aggregate()

        assert metrics.revenue.today == Money.zero(Currency.pkr())
        assert metrics.total_bookings == 0
        assert all(o.percentage == 0 for o in metrics.occupancy)
        assert all(s.percentage == 0 for s in metrics.sport_shares)
        assert len(metrics.revenue_by_day) == 7

    def test_reads_ledger_once(self, mock_ledger, catalog, opening_hours):
        mock_ledger.list_all.return_value = []
        aggregator = MetricsAggregator(
            ledger=mock_ledger,
            catalog=catalog,
            opening_hours=opening_hours,
            currency=Currency.pkr(),
            clock=lambda: TODAY,
        )

        aggregator.aggregate()

        mock_ledger.list_all.assert_called_once_with()
