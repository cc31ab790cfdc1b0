from dataclasses import dataclass
from datetime import date

from courtside.booking.domain.value_object.customer import Customer
from courtside.booking.domain.value_object.hour_range import HourRange
from courtside.catalog.domain import CourtId, SportId
from courtside.shared.domain import Money


@dataclass(frozen=True)
class BookingCandidate:
    """台帳に登録する前の予約内容

    ID・予約番号・ステータスは台帳が登録時に確定させる。
    """

    customer: Customer
    sport_id: SportId
    court_id: CourtId
    booking_date: date
    hour_range: HourRange
    amount: Money
