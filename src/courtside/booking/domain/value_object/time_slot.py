from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TimeSlot:
    """1時間単位の予約枠"""

    day: date
    hour: int

    @property
    def time(self) -> str:
        """機械処理用のトークン（例: "09:00"）"""
        return f"{self.hour:02d}:00"

    @property
    def label(self) -> str:
        """表示用ラベル（例: "9:00 AM"）"""
        suffix = "PM" if self.hour >= 12 else "AM"
        return f"{self.hour % 12 or 12}:00 {suffix}"
