import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date

from aws_lambda_powertools import Logger

from courtside.booking.domain import (
    Booking,
    BookingCandidate,
    BookingId,
    BookingLedger,
    BookingStatus,
    OpeningHours,
    PublicReference,
)
from courtside.booking.domain.repository import ledger_order
from courtside.booking.domain.service.availability import find_conflict
from courtside.catalog.domain import CourtId
from courtside.shared.domain.exception import (
    ResourceNotFoundException,
    SlotConflictException,
    StorageException,
)

logger = Logger(child=True)

DayKey = tuple[CourtId, date]


@dataclass
class _DayLock:
    """コート + 日付 単位のロックと、その取得待ちを含む利用数"""

    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class InMemoryBookingLedger(BookingLedger):
    """プロセス内メモリを使用した BookingLedger の具象実装

    - 予約本体は ID -> Booking のマップが所有し、予約番号は ID への索引のみ持つ
    - create / set_status は コート + 日付 単位のロックで直列化する
      （ロックは利用中の間だけ保持し、使い終わったら破棄する）
    - 読み取りには常にコピーを返すため、書き込み途中の状態は見えない
    """

    def __init__(self, opening_hours: OpeningHours) -> None:
        self._opening_hours = opening_hours
        self._guard = threading.Lock()
        self._day_locks: dict[DayKey, _DayLock] = {}
        self._records: dict[BookingId, Booking] = {}
        self._references: dict[PublicReference, BookingId] = {}
        self._closed = False

    def __enter__(self) -> "InMemoryBookingLedger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """台帳を破棄する。以降の操作は StorageException となる"""
        with self._guard:
            self._records.clear()
            self._references.clear()
            self._day_locks.clear()
            self._closed = True

    @property
    def active_day_locks(self) -> int:
        """現在保持されているロックの数（利用中の コート + 日付 のみ）"""
        with self._guard:
            return len(self._day_locks)

    def create(self, candidate: BookingCandidate) -> Booking:
        self._opening_hours.ensure_contains(candidate.hour_range)

        with self._locked_day((candidate.court_id, candidate.booking_date)):
            booked = self.find_booked(candidate.court_id, candidate.booking_date)
            conflict = find_conflict(candidate.hour_range, booked)
            if conflict is not None:
                logger.info(
                    "Slot conflict",
                    extra={
                        "court_id": str(candidate.court_id),
                        "booking_date": candidate.booking_date.isoformat(),
                        "conflicting_booking_id": str(conflict.id),
                    },
                )
                raise SlotConflictException(
                    f"{candidate.court_id} is already booked at "
                    f"{conflict.hour_range.start_time} on "
                    f"{candidate.booking_date.isoformat()}"
                )

            with self._guard:
                self._ensure_open()
                booking = Booking.from_candidate(
                    id=BookingId.generate(),
                    public_reference=self._unused_reference(),
                    candidate=candidate,
                )
                self._records[booking.id] = booking
                self._references[booking.public_reference] = booking.id

        return booking.copy()

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._guard:
            self._ensure_open()
            booking = self._records.get(booking_id)
            return booking.copy() if booking else None

    def find_by_public_reference(self, reference: PublicReference) -> Booking | None:
        with self._guard:
            self._ensure_open()
            booking_id = self._references.get(reference)
            if booking_id is None:
                return None
            return self._records[booking_id].copy()

    def find_booked(self, court_id: CourtId, booking_date: date) -> list[Booking]:
        with self._guard:
            self._ensure_open()
            booked = [
                booking.copy()
                for booking in self._records.values()
                if booking.court_id == court_id
                and booking.booking_date == booking_date
                and booking.occupies_slot
            ]
        return sorted(booked, key=lambda b: b.hour_range.start_hour)

    def list_all(self) -> list[Booking]:
        with self._guard:
            self._ensure_open()
            snapshot = [booking.copy() for booking in self._records.values()]
        return sorted(snapshot, key=ledger_order)

    def set_status(self, booking_id: BookingId, status: BookingStatus) -> Booking:
        current = self.find_by_id(booking_id)
        if current is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        with self._locked_day((current.court_id, current.booking_date)):
            with self._guard:
                self._ensure_open()
                updated = self._records[booking_id].copy()
            updated.change_status(status)
            with self._guard:
                self._ensure_open()
                self._records[booking_id] = updated.copy()

        return updated

    @contextmanager
    def _locked_day(self, key: DayKey) -> Iterator[None]:
        with self._guard:
            self._ensure_open()
            day_lock = self._day_locks.setdefault(key, _DayLock())
            day_lock.users += 1
        try:
            with day_lock.lock:
                yield
        finally:
            with self._guard:
                day_lock.users -= 1
                if day_lock.users == 0 and self._day_locks.get(key) is day_lock:
                    del self._day_locks[key]

    def _unused_reference(self) -> PublicReference:
        reference = PublicReference.generate()
        while reference in self._references:
            reference = PublicReference.generate()
        return reference

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageException("Booking ledger is closed")
