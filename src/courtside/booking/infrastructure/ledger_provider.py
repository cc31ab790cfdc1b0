from courtside.booking.domain import BookingLedger, OpeningHours
from courtside.booking.infrastructure.dynamodb_booking_ledger import (
    DynamoDBBookingLedger,
)
from courtside.booking.infrastructure.in_memory_booking_ledger import (
    InMemoryBookingLedger,
)
from courtside.shared.config import Settings


def opening_hours_from(settings: Settings) -> OpeningHours:
    return OpeningHours(
        opening_hour=settings.opening_hour, closing_hour=settings.closing_hour
    )


def build_ledger(settings: Settings) -> BookingLedger:
    """設定に応じた予約台帳を生成する"""
    opening_hours = opening_hours_from(settings)
    if settings.ledger_backend == "memory":
        return InMemoryBookingLedger(opening_hours=opening_hours)
    return DynamoDBBookingLedger(
        opening_hours=opening_hours, table_name=settings.table_name
    )
