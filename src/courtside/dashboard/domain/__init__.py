from .metrics import (
    CourtOccupancy,
    DailyBookings,
    DailyRevenue,
    DashboardMetrics,
    DateWindow,
    RevenueSummary,
    SportShare,
)

__all__ = [
    "CourtOccupancy",
    "DailyBookings",
    "DailyRevenue",
    "DashboardMetrics",
    "DateWindow",
    "RevenueSummary",
    "SportShare",
]
