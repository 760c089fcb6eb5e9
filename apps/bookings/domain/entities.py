"""
Booking Domain Entities

- Booking: a confirmed reservation of a room for a time slot on a date
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from shared.domain.base import Entity
from shared.domain.value_objects import TimeSlot


@dataclass(eq=False)
class Booking(Entity):
    """
    Booking entity

    ``room_id`` is a weak reference: it is matched against the registry by
    value at read time and is not required to name an existing room.
    ``date`` is an opaque string compared by equality only.

    Key invariant (enforced by RoomDaySchedule, not here):
    - No two bookings with the same room_id and date have overlapping slots
    """

    room_id: Optional[str]
    date: Optional[str]
    slot: TimeSlot
    customer_name: Optional[str]
    status: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def start(self):
        return self.slot.start

    @property
    def end(self):
        return self.slot.end

    def __str__(self):
        return f"Booking({self.id}, room={self.room_id}, {self.date} {self.slot})"
