"""
Error taxonomy shared by the room registry and the booking ledger.

- StoreUnavailable: the record store failed (server side, retryable)
- SlotConflict: the requested slot overlaps an existing booking (client side)
- ValidationGap: required booking fields are missing or malformed (client side)
"""

from typing import Dict, Iterable, Optional


class HallBookingError(Exception):
    """Base class for domain errors."""


class StoreUnavailable(HallBookingError):
    """Raised when the record store cannot be reached or rejects an operation."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"Record store unavailable during {operation}")


class SlotConflict(HallBookingError):
    """Raised when a room is already booked for an overlapping slot."""

    message = "Room already booked for the given date and time"

    def __init__(self, room_id, date, conflicting_ids: Iterable = ()):
        self.room_id = room_id
        self.date = date
        self.conflicting_ids = [str(booking_id) for booking_id in conflicting_ids]
        super().__init__(self.message)


class ValidationGap(HallBookingError):
    """Raised when a booking request is missing or has malformed fields."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid booking request: {fields}")
