from pydantic import BaseModel

from courtside.dashboard.domain import DashboardMetrics


class CourtOccupancyData(BaseModel):
    court_id: str
    court_name: str
    percentage: int


class MetricsData(BaseModel):
    """売上・稼働率のレスポンスモデル"""

    today_revenue: str
    week_revenue: str
    month_revenue: str
    currency: str
    total_bookings: int
    occupancy: list[CourtOccupancyData]


class DailyRevenueData(BaseModel):
    date: str
    revenue: str


class DailyBookingsData(BaseModel):
    date: str
    counts: dict[str, int]


class SportShareData(BaseModel):
    sport_id: str
    sport_name: str
    percentage: int


class ChartsData(BaseModel):
    """グラフ表示用のレスポンスモデル"""

    revenue_by_day: list[DailyRevenueData]
    bookings_by_day: list[DailyBookingsData]
    sport_shares: list[SportShareData]


class DashboardResponse(BaseModel):
    as_of: str
    metrics: MetricsData
    charts: ChartsData


def to_response(metrics: DashboardMetrics) -> dict:
    """DashboardMetrics をレスポンス辞書に変換する"""
    return DashboardResponse(
        as_of=metrics.as_of.isoformat(),
        metrics=MetricsData(
            today_revenue=str(metrics.revenue.today.amount),
            week_revenue=str(metrics.revenue.week.amount),
            month_revenue=str(metrics.revenue.month.amount),
            currency=str(metrics.revenue.today.currency),
            total_bookings=metrics.total_bookings,
            occupancy=[
                CourtOccupancyData(
                    court_id=str(o.court_id),
                    court_name=o.court_name,
                    percentage=o.percentage,
                )
                for o in metrics.occupancy
            ],
        ),
        charts=ChartsData(
            revenue_by_day=[
                DailyRevenueData(date=d.day.isoformat(), revenue=str(d.revenue.amount))
                for d in metrics.revenue_by_day
            ],
            bookings_by_day=[
                DailyBookingsData(
                    date=d.day.isoformat(),
                    counts={str(court_id): n for court_id, n in d.counts.items()},
                )
                for d in metrics.bookings_by_day
            ],
            sport_shares=[
                SportShareData(
                    sport_id=str(s.sport_id),
                    sport_name=s.sport_name,
                    percentage=s.percentage,
                )
                for s in metrics.sport_shares
            ],
        ),
    ).model_dump()
