from __future__ import annotations

from enum import Enum

from courtside.shared.domain.exception import InvalidTransitionException


class BookingStatus(str, Enum):
    """予約ステータス

    booked（初期状態） -> cancelled / completed（いずれも終端状態）
    """

    BOOKED = "booked"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def can_transition_to(self, target: BookingStatus) -> bool:
        return target in _TRANSITIONS[self]

    def transition_to(self, target: BookingStatus) -> BookingStatus:
        """遷移後のステータスを返す。許可されていない遷移は例外とする"""
        if not self.can_transition_to(target):
            raise InvalidTransitionException(
                f"Cannot change booking status from {self.value} to {target.value}"
            )
        return target


_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.BOOKED: frozenset(
        {BookingStatus.CANCELLED, BookingStatus.COMPLETED}
    ),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}
