from __future__ import annotations

import re
import secrets
from dataclasses import dataclass

from courtside.shared.domain.exception import ValidationException

_PATTERN = re.compile(r"^[0-9A-F]{8}$")


@dataclass(frozen=True)
class PublicReference:
    """顧客向けの予約番号

    例: "3F9A0C1B"
    内部IDとは別に採番し、推測されにくい乱数から生成する。
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not _PATTERN.match(normalized):
            raise ValidationException(f"Invalid booking reference: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PublicReference:
        return cls(value=secrets.token_hex(4).upper())
