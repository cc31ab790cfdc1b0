from __future__ import annotations

from datetime import date

from courtside.booking.domain.enum import BookingStatus
from courtside.booking.domain.event import BookingStatusChanged
from courtside.booking.domain.value_object import (
    BookingCandidate,
    BookingId,
    Customer,
    HourRange,
    PublicReference,
)
from courtside.catalog.domain import CourtId, SportId
from courtside.shared.domain import AggregateRoot, Money


class Booking(AggregateRoot[BookingId]):
    """コート予約エンティティ

    金額は作成時に確定し、以後再計算しない。
    ステータスは cancel / complete を通してのみ変更される。
    """

    def __init__(
        self,
        id: BookingId,
        public_reference: PublicReference,
        customer: Customer,
        sport_id: SportId,
        court_id: CourtId,
        booking_date: date,
        hour_range: HourRange,
        amount: Money,
        status: BookingStatus = BookingStatus.BOOKED,
    ) -> None:
        super().__init__(id)
        self._public_reference = public_reference
        self._customer = customer
        self._sport_id = sport_id
        self._court_id = court_id
        self._booking_date = booking_date
        self._hour_range = hour_range
        self._amount = amount
        self._status = status

    @classmethod
    def from_candidate(
        cls,
        id: BookingId,
        public_reference: PublicReference,
        candidate: BookingCandidate,
    ) -> Booking:
        """台帳への登録時に採番済みの ID で予約を生成する"""
        return cls(
            id=id,
            public_reference=public_reference,
            customer=candidate.customer,
            sport_id=candidate.sport_id,
            court_id=candidate.court_id,
            booking_date=candidate.booking_date,
            hour_range=candidate.hour_range,
            amount=candidate.amount,
        )

    @property
    def public_reference(self) -> PublicReference:
        return self._public_reference

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def sport_id(self) -> SportId:
        return self._sport_id

    @property
    def court_id(self) -> CourtId:
        return self._court_id

    @property
    def booking_date(self) -> date:
        return self._booking_date

    @property
    def hour_range(self) -> HourRange:
        return self._hour_range

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def occupies_slot(self) -> bool:
        """枠を占有しているかどうか

        booked のみが枠を占有する。completed になった予約の枠は再予約できる。
        """
        return self._status == BookingStatus.BOOKED

    @property
    def counts_as_revenue(self) -> bool:
        return self._status in (BookingStatus.BOOKED, BookingStatus.COMPLETED)

    def cancel(self) -> None:
        """予約をキャンセルする"""
        self.change_status(BookingStatus.CANCELLED)

    def complete(self) -> None:
        """予約を利用済みにする"""
        self.change_status(BookingStatus.COMPLETED)

    def change_status(self, target: BookingStatus) -> None:
        """ステータスを遷移させる。不正な遷移では状態を変えずに例外を送出する"""
        previous = self._status
        self._status = previous.transition_to(target)
        self.add_domain_event(
            BookingStatusChanged(booking_id=self.id, previous=previous, current=target)
        )

    def copy(self) -> Booking:
        """同じ内容の別インスタンスを返す（ドメインイベントは引き継がない）"""
        return Booking(
            id=self.id,
            public_reference=self._public_reference,
            customer=self._customer,
            sport_id=self._sport_id,
            court_id=self._court_id,
            booking_date=self._booking_date,
            hour_range=self._hour_range,
            amount=self._amount,
            status=self._status,
        )
