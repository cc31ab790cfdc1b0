from dataclasses import dataclass

from courtside.booking.domain.enum import BookingStatus
from courtside.booking.domain.value_object import BookingId


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが変更されたことを表すドメインイベント"""

    booking_id: BookingId
    previous: BookingStatus
    current: BookingStatus
