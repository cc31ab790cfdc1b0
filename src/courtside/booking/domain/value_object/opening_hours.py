from __future__ import annotations

from dataclasses import dataclass

from courtside.booking.domain.value_object.hour_range import HourRange
from courtside.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class OpeningHours:
    """営業時間 [opening_hour, closing_hour)"""

    opening_hour: int = 6
    closing_hour: int = 23

    def __post_init__(self) -> None:
        if not 0 <= self.opening_hour < self.closing_hour <= 24:
            raise ValueError(
                f"Invalid opening hours: {self.opening_hour}-{self.closing_hour}"
            )

    @property
    def hours_per_day(self) -> int:
        return self.closing_hour - self.opening_hour

    def contains(self, hour_range: HourRange) -> bool:
        return (
            hour_range.start_hour >= self.opening_hour
            and hour_range.end_hour <= self.closing_hour
        )

    def ensure_contains(self, hour_range: HourRange) -> None:
        """営業時間外の時間帯であれば ValidationException を送出する"""
        if not self.contains(hour_range):
            raise ValidationException(
                f"Requested {hour_range.start_time} for {hour_range.hours}h "
                f"is outside opening hours "
                f"{self.opening_hour:02d}:00-{self.closing_hour:02d}:00"
            )
