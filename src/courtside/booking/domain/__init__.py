from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .event import BookingStatusChanged as BookingStatusChanged
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingLedger as BookingLedger
from .value_object import BookingCandidate as BookingCandidate
from .value_object import BookingId as BookingId
from .value_object import Customer as Customer
from .value_object import HourRange as HourRange
from .value_object import OpeningHours as OpeningHours
from .value_object import PublicReference as PublicReference
from .value_object import TimeSlot as TimeSlot
