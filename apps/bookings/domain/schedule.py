"""
Room Day Schedule

This is the consistency boundary for preventing double bookings: all the
bookings of one room on one date. Every admission goes through it, and the
ledger holds the (room_id, date) admission lock while it is loaded and
extended.

Overlap rule (inclusive at both ends, so touching slots conflict):
    existing.start <= candidate.start <= existing.end
    or existing.start <= candidate.end <= existing.end
    or (candidate.start <= existing.start and candidate.end >= existing.end)
"""

from dataclasses import dataclass, field
from typing import List, Optional

from shared.domain.exceptions import SlotConflict
from shared.domain.value_objects import TimeSlot

from .entities import Booking


def is_overlapping(candidate: TimeSlot, existing: TimeSlot) -> bool:
    """True if ``candidate`` conflicts with ``existing`` on the same room/date."""
    return candidate.overlaps_with(existing)


@dataclass
class RoomDaySchedule:
    """
    Bookings already admitted for a single (room_id, date)

    Usage:
        schedule = RoomDaySchedule(room_id, date, repo.find_by_room_and_date(room_id, date))
        schedule.admit(booking)   # raises SlotConflict on overlap
        repo.add(booking)
    """

    room_id: Optional[str]
    date: Optional[str]
    bookings: List[Booking] = field(default_factory=list)

    def conflicts_with(self, slot: TimeSlot) -> List[Booking]:
        return [
            booking for booking in self.bookings
            if is_overlapping(slot, booking.slot)
        ]

    def can_admit(self, slot: TimeSlot) -> bool:
        return not self.conflicts_with(slot)

    def admit(self, booking: Booking) -> Booking:
        """
        Add a booking to the schedule

        Raises:
            SlotConflict: if the booking's slot overlaps any admitted booking
        """
        if booking.room_id != self.room_id or booking.date != self.date:
            raise ValueError(
                f"{booking} does not belong to schedule {self.room_id}/{self.date}"
            )

        conflicts = self.conflicts_with(booking.slot)
        if conflicts:
            raise SlotConflict(
                self.room_id,
                self.date,
                conflicting_ids=[existing.id for existing in conflicts],
            )

        self.bookings.append(booking)
        return booking

    def __len__(self) -> int:
        return len(self.bookings)
