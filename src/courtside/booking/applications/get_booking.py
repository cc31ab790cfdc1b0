from courtside.booking.domain import (
    Booking,
    BookingId,
    BookingLedger,
    PublicReference,
)
from courtside.shared.domain.exception import ResourceNotFoundException


class GetBookingService:
    """予約参照のユースケース"""

    def __init__(self, ledger: BookingLedger) -> None:
        self._ledger = ledger

    def get(self, booking_id: BookingId) -> Booking:
        booking = self._ledger.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return booking

    def get_by_reference(self, reference: PublicReference) -> Booking:
        """顧客向けの予約番号で検索する（予約確認画面用）"""
        booking = self._ledger.find_by_public_reference(reference)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {reference}")
        return booking

    def list_all(self) -> list[Booking]:
        """全予約（日付の降順 -> 開始時刻の昇順）"""
        return self._ledger.list_all()
