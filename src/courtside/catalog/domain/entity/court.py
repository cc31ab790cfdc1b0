from courtside.catalog.domain.value_object import CourtId, DisplayName
from courtside.shared.domain import Entity


class Court(Entity[CourtId]):
    """コートエンティティ（作成後は不変）"""

    def __init__(self, id: CourtId, display_name: DisplayName) -> None:
        super().__init__(id)
        self._display_name = display_name

    @property
    def display_name(self) -> DisplayName:
        return self._display_name
