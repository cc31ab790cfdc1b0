from .dynamodb_booking_ledger import DynamoDBBookingLedger
from .in_memory_booking_ledger import InMemoryBookingLedger
from .ledger_provider import build_ledger, opening_hours_from

__all__ = [
    "DynamoDBBookingLedger",
    "InMemoryBookingLedger",
    "build_ledger",
    "opening_hours_from",
]
