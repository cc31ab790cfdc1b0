from .booking_candidate import BookingCandidate
from .booking_id import BookingId
from .customer import Customer
from .hour_range import MAX_HOURS, MIN_HOURS, HourRange
from .opening_hours import OpeningHours
from .public_reference import PublicReference
from .time_slot import TimeSlot

__all__ = [
    "BookingCandidate",
    "BookingId",
    "Customer",
    "HourRange",
    "MAX_HOURS",
    "MIN_HOURS",
    "OpeningHours",
    "PublicReference",
    "TimeSlot",
]
