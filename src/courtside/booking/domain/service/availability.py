from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from courtside.booking.domain.entity import Booking
from courtside.booking.domain.repository import BookingLedger
from courtside.booking.domain.service.slot_grid import slot_grid
from courtside.booking.domain.value_object import (
    BookingId,
    HourRange,
    OpeningHours,
    TimeSlot,
)
from courtside.catalog.domain import CatalogRepository, CourtId
from courtside.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class SlotAvailability:
    """予約枠と、その枠の空き状況"""

    slot: TimeSlot
    is_available: bool
    booking_id: BookingId | None = None


def find_conflict(requested: HourRange, existing: Iterable[Booking]) -> Booking | None:
    """要求された時間帯と重なる booked の予約を返す（なければ None）"""
    for booking in existing:
        if booking.occupies_slot and booking.hour_range.overlaps(requested):
            return booking
    return None


class AvailabilityChecker:
    """空き状況の判定

    NOTE: 枠を占有するのは booked の予約のみ。completed の予約は
    同じ枠の新規予約を妨げない（既存システムの挙動を維持している）。
    """

    def __init__(
        self,
        ledger: BookingLedger,
        catalog: CatalogRepository,
        opening_hours: OpeningHours,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._opening_hours = opening_hours

    @property
    def opening_hours(self) -> OpeningHours:
        return self._opening_hours

    def is_slot_free(
        self, court_id: CourtId, booking_date: date, start_time: str, hours: int
    ) -> bool:
        """指定の時間帯が予約可能かどうか"""
        try:
            requested = HourRange.from_start_time(start_time, hours)
        except ValidationException:
            return False
        if not self._opening_hours.contains(requested):
            return False
        booked = self._ledger.find_booked(court_id, booking_date)
        return find_conflict(requested, booked) is None

    def day_grid(self, booking_date: date) -> dict[CourtId, list[SlotAvailability]]:
        """全コートの1日分の予約枠と空き状況

        複数時間の予約は、その予約がまたがるすべての枠を占有する。
        """
        grid: dict[CourtId, list[SlotAvailability]] = {}
        for court in self._catalog.list_courts():
            booked = self._ledger.find_booked(court.id, booking_date)
            grid[court.id] = [
                self._annotate(slot, booked)
                for slot in slot_grid(booking_date, self._opening_hours)
            ]
        return grid

    def _annotate(self, slot: TimeSlot, booked: list[Booking]) -> SlotAvailability:
        occupying = find_conflict(HourRange(start_hour=slot.hour, hours=1), booked)
        if occupying is None:
            return SlotAvailability(slot=slot, is_available=True)
        return SlotAvailability(slot=slot, is_available=False, booking_id=occupying.id)
