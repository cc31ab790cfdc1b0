from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from courtside.catalog.domain import CourtId, SportId
from courtside.shared.domain import Money


@dataclass(frozen=True)
class DateWindow:
    """集計期間 [start, end)"""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Window end must be after start")

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def each_day(self) -> list[date]:
        """期間内の日付（古い順）"""
        return [self.start + timedelta(days=i) for i in range(self.days)]

    @classmethod
    def single_day(cls, day: date) -> DateWindow:
        return cls(start=day, end=day + timedelta(days=1))

    @classmethod
    def week_of(cls, day: date, week_start: int = 0) -> DateWindow:
        """day を含む週（week_start: 0 = 月曜 ... 6 = 日曜）"""
        offset = (day.weekday() - week_start) % 7
        start = day - timedelta(days=offset)
        return cls(start=start, end=start + timedelta(days=7))

    @classmethod
    def month_of(cls, day: date) -> DateWindow:
        start = day.replace(day=1)
        if start.month == 12:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return cls(start=start, end=end)

    @classmethod
    def trailing(cls, day: date, days: int = 7) -> DateWindow:
        """day を最終日とする直近 days 日間"""
        return cls(start=day - timedelta(days=days - 1), end=day + timedelta(days=1))


@dataclass(frozen=True)
class RevenueSummary:
    today: Money
    week: Money
    month: Money


@dataclass(frozen=True)
class CourtOccupancy:
    court_id: CourtId
    court_name: str
    percentage: int


@dataclass(frozen=True)
class DailyRevenue:
    day: date
    revenue: Money


@dataclass(frozen=True)
class DailyBookings:
    day: date
    counts: dict[CourtId, int]


@dataclass(frozen=True)
class SportShare:
    sport_id: SportId
    sport_name: str
    percentage: int


@dataclass(frozen=True)
class DashboardMetrics:
    """ダッシュボードの集計結果"""

    as_of: date
    revenue: RevenueSummary
    total_bookings: int
    occupancy: list[CourtOccupancy]
    revenue_by_day: list[DailyRevenue]
    bookings_by_day: list[DailyBookings]
    sport_shares: list[SportShare]
