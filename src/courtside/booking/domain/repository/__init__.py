from .booking_ledger import BookingLedger, ledger_order

__all__ = ["BookingLedger", "ledger_order"]
