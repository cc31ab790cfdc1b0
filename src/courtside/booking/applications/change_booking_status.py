from aws_lambda_powertools import Logger

from courtside.booking.domain import Booking, BookingId, BookingLedger, BookingStatus

logger = Logger(child=True)


class _ChangeBookingStatusService:
    """ステータス変更ユースケースの共通処理"""

    target_status: BookingStatus

    def __init__(self, ledger: BookingLedger) -> None:
        self._ledger = ledger

    def _change(self, booking_id: BookingId) -> Booking:
        booking = self._ledger.set_status(booking_id, self.target_status)
        for event in booking.flush_domain_events():
            logger.info(
                "Booking status changed",
                extra={
                    "booking_id": str(event.booking_id),
                    "previous": event.previous.value,
                    "current": event.current.value,
                },
            )
        return booking


class CancelBookingService(_ChangeBookingStatusService):
    """予約キャンセルのユースケース"""

    target_status = BookingStatus.CANCELLED

    def cancel(self, booking_id: BookingId) -> Booking:
        """予約をキャンセルする（キャンセル済み・利用済みの予約は不可）"""
        return self._change(booking_id)


class CompleteBookingService(_ChangeBookingStatusService):
    """予約を利用済みにするユースケース"""

    target_status = BookingStatus.COMPLETED

    def complete(self, booking_id: BookingId) -> Booking:
        """予約を利用済みにする（キャンセル済み・利用済みの予約は不可）"""
        return self._change(booking_id)
