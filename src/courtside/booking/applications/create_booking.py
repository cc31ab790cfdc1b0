from aws_lambda_powertools import Logger

from courtside.booking.domain import (
    Booking,
    BookingDetails,
    BookingFactory,
    BookingLedger,
)
from courtside.catalog.domain import CatalogRepository, CourtId, SportId
from courtside.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class CreateBookingService:
    """コート予約のユースケース"""

    def __init__(
        self,
        ledger: BookingLedger,
        catalog: CatalogRepository,
        factory: BookingFactory,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._factory = factory

    def create(self, details: BookingDetails) -> Booking:
        """コートを予約する

        Raises:
            ResourceNotFoundException: 競技・コートが存在しない
            ValidationException: 時間帯が不正・営業時間外
            SlotConflictException: 既存の予約と重複
        """
        sport = self._catalog.find_sport(SportId(details["sport_id"]))
        if sport is None:
            raise ResourceNotFoundException(f"Sport not found: {details['sport_id']}")
        if self._catalog.find_court(CourtId(details["court_id"])) is None:
            raise ResourceNotFoundException(f"Court not found: {details['court_id']}")

        candidate = self._factory.create(details, sport)
        booking = self._ledger.create(candidate)

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "court_id": str(booking.court_id),
                "booking_date": booking.booking_date.isoformat(),
                "start_time": booking.hour_range.start_time,
                "hours": booking.hour_range.hours,
            },
        )
        return booking
