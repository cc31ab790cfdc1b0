from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> Money:
        """単価 × 数量 の金額を返す"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """集計の初期値"""
        return cls(Decimal("0"), currency)

    @classmethod
    def pkr(cls, amount: Decimal | int) -> Money:
        """パキスタン・ルピーで Money を生成"""
        return cls(Decimal(amount), Currency.pkr())
