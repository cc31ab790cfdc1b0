from datetime import date
from typing import TypedDict

from courtside.booking.domain.value_object import (
    BookingCandidate,
    Customer,
    HourRange,
    OpeningHours,
)
from courtside.catalog.domain import CourtId, Sport
from courtside.shared.domain.exception import ValidationException


class BookingDetails(TypedDict):
    """予約リクエストの入力データ構造"""

    customer_name: str
    customer_phone: str
    sport_id: str
    court_id: str
    booking_date: str
    start_time: str
    hours: int


class BookingFactory:
    """予約候補のファクトリ

    - プリミティブ型から Value Object への変換
    - 営業時間のチェック
    - 料金の確定（競技の時間単価 × 時間数）
    """

    def __init__(self, opening_hours: OpeningHours) -> None:
        self._opening_hours = opening_hours

    def create(self, details: BookingDetails, sport: Sport) -> BookingCandidate:
        """台帳に登録する予約候補を生成する

        Args:
            details: 予約リクエストの内容
            sport: 予約対象の競技（料金計算に使用）

        Returns:
            BookingCandidate: 金額確定済みの予約候補
        """
        if str(sport.id) != details["sport_id"]:
            raise ValueError(
                f"Sport mismatch: {sport.id} != {details['sport_id']}"
            )

        hour_range = HourRange.from_start_time(details["start_time"], details["hours"])
        self._opening_hours.ensure_contains(hour_range)

        return BookingCandidate(
            customer=Customer(
                name=details["customer_name"].strip(),
                phone=details["customer_phone"].strip(),
            ),
            sport_id=sport.id,
            court_id=CourtId(details["court_id"]),
            booking_date=_parse_date(details["booking_date"]),
            hour_range=hour_range,
            amount=sport.price_for(hour_range.hours),
        )


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValidationException(f"Invalid booking date: {value}") from e
