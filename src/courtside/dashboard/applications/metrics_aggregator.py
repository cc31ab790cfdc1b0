from collections.abc import Callable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from courtside.booking.domain import Booking, BookingLedger, OpeningHours
from courtside.catalog.domain import CatalogRepository
from courtside.dashboard.domain import (
    CourtOccupancy,
    DailyBookings,
    DailyRevenue,
    DashboardMetrics,
    DateWindow,
    RevenueSummary,
    SportShare,
)
from courtside.shared.domain import Currency, Money

TRAILING_DAYS = 7


def _percentage(part: int, whole: int) -> int:
    """四捨五入した百分率（whole が 0 の場合は 0）"""
    if whole == 0:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class MetricsAggregator:
    """売上・稼働率の集計（読み取り専用）

    集計対象は booked / completed の予約のみ（cancelled は除外）。
    1回の集計では台帳のスナップショットを1度だけ取得する。
    """

    def __init__(
        self,
        ledger: BookingLedger,
        catalog: CatalogRepository,
        opening_hours: OpeningHours,
        currency: Currency,
        week_start: int = 0,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._opening_hours = opening_hours
        self._currency = currency
        self._week_start = week_start
        self._clock = clock

    def aggregate(self) -> DashboardMetrics:
        today = self._clock()
        bookings = [b for b in self._ledger.list_all() if b.counts_as_revenue]
        return DashboardMetrics(
            as_of=today,
            revenue=self._revenue_summary(bookings, today),
            total_bookings=len(bookings),
            occupancy=self._court_occupancy(bookings, today),
            revenue_by_day=self._revenue_by_day(bookings, today),
            bookings_by_day=self._bookings_by_day(bookings, today),
            sport_shares=self._sport_shares(bookings),
        )

    def _revenue_summary(
        self, bookings: list[Booking], today: date
    ) -> RevenueSummary:
        week = DateWindow.week_of(today, self._week_start)
        return RevenueSummary(
            today=self._revenue(bookings, DateWindow.single_day(today)),
            week=self._revenue(bookings, week),
            month=self._revenue(bookings, DateWindow.month_of(today)),
        )

    def _court_occupancy(
        self, bookings: list[Booking], today: date
    ) -> list[CourtOccupancy]:
        """直近7日間のコート別稼働率

        稼働率 = 予約時間の合計 / ((閉店 - 開店) * 7) * 100
        """
        window = DateWindow.trailing(today, TRAILING_DAYS)
        orderable_hours = self._opening_hours.hours_per_day * TRAILING_DAYS
        occupancy = []
        for court in self._catalog.list_courts():
            booked_hours = sum(
                b.hour_range.hours
                for b in bookings
                if b.court_id == court.id and window.contains(b.booking_date)
            )
            occupancy.append(
                CourtOccupancy(
                    court_id=court.id,
                    court_name=str(court.display_name),
                    percentage=_percentage(booked_hours, orderable_hours),
                )
            )
        return occupancy

    def _revenue_by_day(
        self, bookings: list[Booking], today: date
    ) -> list[DailyRevenue]:
        """直近7日間の日別売上（古い順）"""
        return [
            DailyRevenue(
                day=day,
                revenue=self._revenue(bookings, DateWindow.single_day(day)),
            )
            for day in DateWindow.trailing(today, TRAILING_DAYS).each_day()
        ]

    def _bookings_by_day(
        self, bookings: list[Booking], today: date
    ) -> list[DailyBookings]:
        """直近7日間の日別・コート別予約件数（古い順）"""
        courts = self._catalog.list_courts()
        series = []
        for day in DateWindow.trailing(today, TRAILING_DAYS).each_day():
            day_bookings = [b for b in bookings if b.booking_date == day]
            series.append(
                DailyBookings(
                    day=day,
                    counts={
                        court.id: sum(
                            1 for b in day_bookings if b.court_id == court.id
                        )
                        for court in courts
                    },
                )
            )
        return series

    def _sport_shares(self, bookings: list[Booking]) -> list[SportShare]:
        """競技別の予約件数の割合"""
        sports = self._catalog.list_sports()
        counts = {
            sport.id: sum(1 for b in bookings if b.sport_id == sport.id)
            for sport in sports
        }
        total = sum(counts.values())
        return [
            SportShare(
                sport_id=sport.id,
                sport_name=str(sport.display_name),
                percentage=_percentage(counts[sport.id], total),
            )
            for sport in sports
        ]

    def _revenue(self, bookings: list[Booking], window: DateWindow) -> Money:
        total = Money.zero(self._currency)
        for booking in bookings:
            if window.contains(booking.booking_date):
                total = total.add(booking.amount)
        return total
