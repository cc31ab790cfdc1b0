from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import ClassVar
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定（環境変数から生成）

    Attributes:
        table_name: DynamoDB テーブル名（LEDGER_BACKEND=dynamodb の場合は必須）
        ledger_backend: 予約台帳の実装 ("dynamodb" | "memory")
        opening_hour: 営業開始時刻（この時刻を含む）
        closing_hour: 営業終了時刻（この時刻を含まない）
        currency: 料金の通貨コード
        week_start: 週の開始曜日（0 = 月曜）
        timezone: 「今日」を決めるタイムゾーン
    """

    BACKENDS: ClassVar[frozenset[str]] = frozenset({"dynamodb", "memory"})

    table_name: str | None = None
    ledger_backend: str = "dynamodb"
    opening_hour: int = 6
    closing_hour: int = 23
    currency: str = "PKR"
    week_start: int = 0
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        if self.ledger_backend not in self.BACKENDS:
            raise ValueError(f"Unknown ledger backend: {self.ledger_backend}")
        if not 0 <= self.opening_hour < self.closing_hour <= 24:
            raise ValueError(
                f"Invalid opening hours: {self.opening_hour}-{self.closing_hour}"
            )
        if not 0 <= self.week_start <= 6:
            raise ValueError(f"week_start must be 0-6, got {self.week_start}")
        if self.ledger_backend == "dynamodb" and not self.table_name:
            raise ValueError("TABLE_NAME is required for the dynamodb backend")

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から設定を読み込む"""
        return cls(
            table_name=os.getenv("TABLE_NAME"),
            ledger_backend=os.getenv("LEDGER_BACKEND", "dynamodb"),
            opening_hour=int(os.getenv("OPENING_HOUR", "6")),
            closing_hour=int(os.getenv("CLOSING_HOUR", "23")),
            currency=os.getenv("CURRENCY", "PKR"),
            week_start=int(os.getenv("WEEK_START", "0")),
            timezone=os.getenv("TIMEZONE", "UTC"),
        )

    def today(self) -> date:
        """設定タイムゾーンでの今日の日付"""
        return datetime.now(ZoneInfo(self.timezone)).date()


@lru_cache
def get_settings() -> Settings:
    """プロセス内で共有する設定を返す"""
    return Settings.from_env()
