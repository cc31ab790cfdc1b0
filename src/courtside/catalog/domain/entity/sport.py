from courtside.catalog.domain.value_object import DisplayName, SportId
from courtside.shared.domain import Entity, Money


class Sport(Entity[SportId]):
    """競技エンティティ（作成後は不変）

    料金改定は同じ ID で新しい Sport を保存して表現する。
    既存の予約金額は作成時に確定しているため影響を受けない。
    """

    def __init__(
        self, id: SportId, display_name: DisplayName, price_per_hour: Money
    ) -> None:
        super().__init__(id)
        self._display_name = display_name
        self._price_per_hour = price_per_hour

    @property
    def display_name(self) -> DisplayName:
        return self._display_name

    @property
    def price_per_hour(self) -> Money:
        return self._price_per_hour

    def price_for(self, hours: int) -> Money:
        """利用時間に対する料金"""
        return self._price_per_hour.multiply(hours)
