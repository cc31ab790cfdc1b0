from dataclasses import dataclass
from datetime import date

from courtside.booking.domain.service.availability import (
    AvailabilityChecker,
    SlotAvailability,
)
from courtside.catalog.domain import CatalogRepository, Court, CourtId, Sport


@dataclass(frozen=True)
class DayAvailability:
    """1日分の空き状況（カタログ情報を含む）"""

    booking_date: date
    courts: list[Court]
    sports: list[Sport]
    slots: dict[CourtId, list[SlotAvailability]]


class GetAvailabilityService:
    """空き状況照会のユースケース"""

    def __init__(
        self, checker: AvailabilityChecker, catalog: CatalogRepository
    ) -> None:
        self._checker = checker
        self._catalog = catalog

    def get(self, booking_date: date) -> DayAvailability:
        return DayAvailability(
            booking_date=booking_date,
            courts=self._catalog.list_courts(),
            sports=self._catalog.list_sports(),
            slots=self._checker.day_grid(booking_date),
        )
