from abc import abstractmethod
from datetime import date

from courtside.booking.domain.entity import Booking
from courtside.booking.domain.enum import BookingStatus
from courtside.booking.domain.value_object import (
    BookingCandidate,
    BookingId,
    PublicReference,
)
from courtside.catalog.domain import CourtId
from courtside.shared.domain import Repository


def ledger_order(booking: Booking) -> tuple:
    """一覧の並び順: 日付の降順 -> 開始時刻の昇順 -> 内部ID"""
    return (
        -booking.booking_date.toordinal(),
        booking.hour_range.start_hour,
        str(booking.id),
    )


class BookingLedger(Repository[Booking, BookingId]):
    """予約台帳のインターフェース

    - 予約は追記のみ（削除しない）。変更できるのはステータスだけ
    - 同じ コート + 日付 に対する create / set_status は直列化される
    """

    @abstractmethod
    def create(self, candidate: BookingCandidate) -> Booking:
        """空き確認と登録を不可分に行う

        Raises:
            ValidationException: 営業時間外の時間帯
            SlotConflictException: booked の予約と重複
            StorageException: 永続化に失敗（予約は登録されていない）
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """内部IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_public_reference(self, reference: PublicReference) -> Booking | None:
        """予約番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_booked(self, court_id: CourtId, booking_date: date) -> list[Booking]:
        """コート・日付の booked 状態の予約を返す"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        """全予約を ledger_order の順で返す"""
        raise NotImplementedError

    @abstractmethod
    def set_status(self, booking_id: BookingId, status: BookingStatus) -> Booking:
        """ステータスを遷移させて保存する

        Raises:
            ResourceNotFoundException: 予約が存在しない
            InvalidTransitionException: 許可されていない遷移
            StorageException: 永続化に失敗（ステータスは変わっていない）
        """
        raise NotImplementedError
