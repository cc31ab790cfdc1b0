from __future__ import annotations

from dataclasses import dataclass

from courtside.booking.domain.service.overlap import ranges_overlap
from courtside.shared.domain.exception import ValidationException

MIN_HOURS = 1
MAX_HOURS = 8


@dataclass(frozen=True)
class HourRange:
    """予約時間帯（開始時刻 + 時間数）

    半開区間 [start_hour, start_hour + hours) として扱う。
    """

    start_hour: int
    hours: int

    def __post_init__(self) -> None:
        if not 0 <= self.start_hour <= 23:
            raise ValidationException(f"Start hour out of range: {self.start_hour}")
        if not MIN_HOURS <= self.hours <= MAX_HOURS:
            raise ValidationException(
                f"Hours must be between {MIN_HOURS} and {MAX_HOURS}, got {self.hours}"
            )

    @property
    def end_hour(self) -> int:
        return self.start_hour + self.hours

    @property
    def start_time(self) -> str:
        """"HH:MM" 形式の開始時刻"""
        return f"{self.start_hour:02d}:00"

    def covered_hours(self) -> range:
        """この時間帯が占有する各時刻"""
        return range(self.start_hour, self.end_hour)

    def overlaps(self, other: HourRange) -> bool:
        return ranges_overlap(
            self.start_hour, self.end_hour, other.start_hour, other.end_hour
        )

    @classmethod
    def from_start_time(cls, start_time: str, hours: int) -> HourRange:
        """"HH:MM" 形式の開始時刻から生成する（正時のみ受け付ける）"""
        try:
            hour_part, minute_part = start_time.split(":")[:2]
            hour, minute = int(hour_part), int(minute_part)
        except ValueError as e:
            raise ValidationException(f"Invalid start time: {start_time}") from e
        if minute != 0:
            raise ValidationException(
                f"Start time must be on the hour, got {start_time}"
            )
        return cls(start_hour=hour, hours=hours)
