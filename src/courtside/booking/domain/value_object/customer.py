from dataclasses import dataclass

from courtside.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Customer:
    """予約者（氏名 + 電話番号）

    書式の詳細なチェックはリクエスト検証層で行う。
    """

    name: str
    phone: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationException("Customer name cannot be empty")
        if not self.phone or not self.phone.strip():
            raise ValidationException("Customer phone cannot be empty")
