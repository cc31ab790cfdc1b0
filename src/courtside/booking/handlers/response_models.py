from __future__ import annotations

from pydantic import BaseModel

from courtside.booking.applications.get_availability import DayAvailability
from courtside.booking.domain import Booking
from courtside.booking.domain.service.availability import SlotAvailability
from courtside.catalog.domain import Court, Sport
from courtside.catalog.handlers.response_models import (
    CourtData,
    SportData,
    to_court_data,
    to_sport_data,
)


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    public_reference: str
    customer_name: str
    customer_phone: str
    sport_id: str
    court_id: str
    booking_date: str
    start_time: str
    hours: int
    amount: str
    currency: str
    status: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingListData(BaseModel):
    """予約一覧のレスポンスモデル"""

    bookings: list[BookingData]
    courts: list[CourtData]
    sports: list[SportData]
    count: int


class SlotData(BaseModel):
    """予約枠のレスポンスモデル"""

    time: str
    label: str
    available: bool
    booking_id: str | None = None


class AvailabilityData(BaseModel):
    """空き状況のレスポンスモデル"""

    date: str
    courts: list[CourtData]
    sports: list[SportData]
    slots: dict[str, list[SlotData]]


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        public_reference=str(booking.public_reference),
        customer_name=booking.customer.name,
        customer_phone=booking.customer.phone,
        sport_id=str(booking.sport_id),
        court_id=str(booking.court_id),
        booking_date=booking.booking_date.isoformat(),
        start_time=booking.hour_range.start_time,
        hours=booking.hour_range.hours,
        amount=str(booking.amount.amount),
        currency=str(booking.amount.currency),
        status=booking.status.value,
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(booking)).model_dump()


def to_list_response(
    bookings: list[Booking], courts: list[Court], sports: list[Sport]
) -> dict:
    return BookingListData(
        bookings=[to_booking_data(b) for b in bookings],
        courts=[to_court_data(c) for c in courts],
        sports=[to_sport_data(s) for s in sports],
        count=len(bookings),
    ).model_dump()


def to_slot_data(slot: SlotAvailability) -> SlotData:
    return SlotData(
        time=slot.slot.time,
        label=slot.slot.label,
        available=slot.is_available,
        booking_id=str(slot.booking_id) if slot.booking_id else None,
    )


def to_availability_response(availability: DayAvailability) -> dict:
    return AvailabilityData(
        date=availability.booking_date.isoformat(),
        courts=[to_court_data(c) for c in availability.courts],
        sports=[to_sport_data(s) for s in availability.sports],
        slots={
            str(court_id): [to_slot_data(s) for s in slots]
            for court_id, slots in availability.slots.items()
        },
    ).model_dump()
