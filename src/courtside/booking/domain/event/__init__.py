from .booking_status_changed import BookingStatusChanged

__all__ = ["BookingStatusChanged"]
