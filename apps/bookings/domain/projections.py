"""
Read-side rows produced by the ledger's reporting joins.

Field names on the wire are set by the serializers; these rows carry the
values in the order and shape the reports define.
"""

from dataclasses import dataclass
from typing import Any, Optional

from apps.rooms.domain.entities import Room

from .entities import Booking


@dataclass(frozen=True)
class RoomBookingRow:
    room_name: Any
    room_id: Optional[str]
    booked_status: Optional[str]
    customer_name: Optional[str]
    date: Optional[str]
    start_time: Any
    end_time: Any

    @classmethod
    def join(cls, room: Room, booking: Booking) -> "RoomBookingRow":
        return cls(
            room_name=room.name,
            room_id=room.room_id,
            booked_status=booking.status,
            customer_name=booking.customer_name,
            date=booking.date,
            start_time=booking.start,
            end_time=booking.end,
        )


@dataclass(frozen=True)
class CustomerBookingRow:
    customer_name: Optional[str]
    room_name: Any
    date: Optional[str]
    start_time: Any
    end_time: Any

    @classmethod
    def join(cls, booking: Booking, room: Room) -> "CustomerBookingRow":
        return cls(
            customer_name=booking.customer_name,
            room_name=room.name,
            date=booking.date,
            start_time=booking.start,
            end_time=booking.end,
        )


@dataclass(frozen=True)
class CustomerHistoryRow:
    """
    One booking in a customer's history.

    ``room_name`` holds the booking's roomId, not the room's display name,
    and ``booking_date`` repeats ``date``. Existing clients depend on both.
    """

    customer_name: Optional[str]
    room_name: Optional[str]
    date: Optional[str]
    start_time: Any
    end_time: Any
    booking_id: str
    booking_date: Optional[str]
    booking_status: Optional[str]

    @classmethod
    def from_booking(cls, booking: Booking) -> "CustomerHistoryRow":
        return cls(
            customer_name=booking.customer_name,
            room_name=booking.room_id,
            date=booking.date,
            start_time=booking.start,
            end_time=booking.end,
            booking_id=str(booking.id),
            booking_date=booking.date,
            booking_status=booking.status,
        )
