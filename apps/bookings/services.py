"""
Booking Ledger

Admission of new bookings and the reporting joins between bookings and the
room registry.

Admission is check-then-insert. It runs entirely inside the booking store's
``lock_slot(room_id, date)`` scope so that concurrent requests for the same
room and date cannot both pass the overlap check:

1. Enter the (room_id, date) admission scope
2. Load the room/date schedule from the store
3. Admit the candidate into the schedule (raises SlotConflict on overlap)
4. Insert the booking
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from apps.rooms.services import RoomRegistry
from shared.domain.exceptions import SlotConflict, ValidationGap
from shared.domain.value_objects import TimeSlot

from .domain.entities import Booking
from .domain.projections import CustomerBookingRow, CustomerHistoryRow, RoomBookingRow
from .domain.schedule import RoomDaySchedule, is_overlapping
from .repositories import BookingRepository

logger = logging.getLogger(__name__)


@dataclass
class BookRoomCommand:
    """Request to reserve ``room_id`` on ``date`` from ``start`` to ``end``."""
    room_id: Optional[str]
    date: Optional[str]
    start: Any
    end: Any
    customer_name: Optional[str]
    status: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(self.start, self.end)


class BookingLedger:
    """
    Stores confirmed bookings and answers reporting queries.

    The ledger owns the join key (roomId), so the room/booking reports are
    computed here with the registry as a read-only collaborator.

    ``strict_validation`` and ``require_known_room`` are off by default; with
    both off any booking payload is accepted and only overlaps are rejected.
    """

    REQUIRED_FIELDS = ("room_id", "date", "start", "end", "customer_name")

    def __init__(
        self,
        bookings: BookingRepository,
        registry: RoomRegistry,
        *,
        strict_validation: bool = False,
        require_known_room: bool = False,
    ):
        self._bookings = bookings
        self._registry = registry
        self.strict_validation = strict_validation
        self.require_known_room = require_known_room

    is_overlapping = staticmethod(is_overlapping)

    def book_room(self, command: BookRoomCommand) -> Booking:
        """
        Admit a booking

        Raises:
            ValidationGap: if validation is enabled and the request fails it
            SlotConflict: if the slot overlaps a booking on the same room/date
            StoreUnavailable: if the store fails; nothing is written
        """
        self._validate(command)

        booking = Booking(
            room_id=command.room_id,
            date=command.date,
            slot=command.slot,
            customer_name=command.customer_name,
            status=command.status,
            attributes=dict(command.attributes),
        )

        with self._bookings.lock_slot(command.room_id, command.date):
            schedule = RoomDaySchedule(
                room_id=command.room_id,
                date=command.date,
                bookings=self._bookings.find_by_room_and_date(command.room_id, command.date),
            )
            try:
                schedule.admit(booking)
            except SlotConflict as exc:
                logger.info(
                    "Booking rejected: room=%s date=%s slot=%s conflicts=%s",
                    command.room_id, command.date, command.slot, exc.conflicting_ids,
                )
                raise
            self._bookings.add(booking)

        logger.info(
            "Booking created: id=%s room=%s date=%s slot=%s customer=%s",
            booking.id, booking.room_id, booking.date, booking.slot, booking.customer_name,
        )
        return booking

    def _validate(self, command: BookRoomCommand) -> None:
        errors: Dict[str, str] = {}

        if self.strict_validation:
            for name in self.REQUIRED_FIELDS:
                value = getattr(command, name)
                if value is None or value == "":
                    errors[name] = "This field is required."
            if "start" not in errors and "end" not in errors and not command.slot.is_ordered:
                errors["end"] = "End must come after start."

        if self.require_known_room and "room_id" not in errors:
            if not self._registry.find_rooms_by_room_id(command.room_id):
                errors["room_id"] = f"Unknown room {command.room_id!r}."

        if errors:
            raise ValidationGap(errors)

    def list_room_bookings(self) -> List[RoomBookingRow]:
        """One row per (room, booking) pair, rooms in registry order."""
        rows: List[RoomBookingRow] = []
        for room in self._registry.list_rooms():
            for booking in self._bookings.find_by_room_id(room.room_id):
                rows.append(RoomBookingRow.join(room, booking))
        return rows

    def list_customer_bookings(self) -> List[CustomerBookingRow]:
        """One row per (booking, room) pair; bookings with no room are skipped."""
        rows: List[CustomerBookingRow] = []
        for booking in self._bookings.list():
            for room in self._registry.find_rooms_by_room_id(booking.room_id):
                rows.append(CustomerBookingRow.join(booking, room))
        return rows

    def get_customer_history(self, customer_name: str) -> List[CustomerHistoryRow]:
        """
        Every booking made under exactly ``customer_name``

        An unknown customer yields an empty list, not an error.
        """
        return [
            CustomerHistoryRow.from_booking(booking)
            for booking in self._bookings.find_by_customer(customer_name)
        ]
