"""
Booking record stores.

Two interchangeable backends implement ``BookingRepository``:
- DjangoBookingRepository: persists bookings through the ORM and extends the
  admission lock across processes with a locked BookingSlotLock row
- InMemoryBookingRepository: keeps bookings in process memory
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List, Optional
import threading

from django.db import transaction  # type: ignore

from shared.application.locks import KeyedLock
from shared.domain.value_objects import TimeSlot
from shared.infrastructure.store import lock_queryset_if_possible, store_errors

from .domain.entities import Booking


class BookingRepository(ABC):
    """Append-only booking store with a per-(room_id, date) admission scope."""

    @abstractmethod
    def add(self, booking: Booking) -> str:
        """Insert a booking and return its booking id."""

    @abstractmethod
    def list(self) -> List[Booking]:
        """All bookings in store order."""

    @abstractmethod
    def find_by_room_id(self, room_id: Optional[str]) -> List[Booking]:
        """Bookings for ``room_id``. ``None`` matches nothing."""

    @abstractmethod
    def find_by_room_and_date(self, room_id: Optional[str], date: Optional[str]) -> List[Booking]:
        """Bookings sharing both ``room_id`` and ``date`` (missing values match missing values)."""

    @abstractmethod
    def find_by_customer(self, customer_name: Optional[str]) -> List[Booking]:
        """Bookings whose customer name equals ``customer_name`` exactly."""

    @abstractmethod
    def lock_slot(self, room_id: Optional[str], date: Optional[str]):
        """
        Context manager serialising admissions for one (room_id, date)

        The overlap query and the insert must both run inside it.
        """


class DjangoBookingRepository(BookingRepository):

    # Shared by every instance: they all write to the same database.
    _slot_locks = KeyedLock()

    def add(self, booking: Booking) -> str:
        from .models import Booking as BookingModel

        with store_errors("booking insert"):
            record = BookingModel.objects.create(
                booking_id=booking.id,
                room_id=booking.room_id,
                date=booking.date,
                start=booking.start,
                end=booking.end,
                customer_name=booking.customer_name,
                status=booking.status,
                attributes=booking.attributes,
            )
        booking.created_at = record.created_at
        return str(booking.id)

    def list(self) -> List[Booking]:
        from .models import Booking as BookingModel

        with store_errors("booking list"):
            return [self._to_domain(record) for record in BookingModel.objects.all()]

    def find_by_room_id(self, room_id: Optional[str]) -> List[Booking]:
        from .models import Booking as BookingModel

        if room_id is None:
            return []
        with store_errors("booking lookup by room"):
            return [
                self._to_domain(record)
                for record in BookingModel.objects.filter(room_id=room_id)
            ]

    def find_by_room_and_date(self, room_id: Optional[str], date: Optional[str]) -> List[Booking]:
        from .models import Booking as BookingModel

        with store_errors("booking lookup by room and date"):
            queryset = BookingModel.objects.filter(room_id=room_id, date=date)
            return [self._to_domain(record) for record in queryset]

    def find_by_customer(self, customer_name: Optional[str]) -> List[Booking]:
        from .models import Booking as BookingModel

        if customer_name is None:
            return []
        with store_errors("booking lookup by customer"):
            return [
                self._to_domain(record)
                for record in BookingModel.objects.filter(customer_name=customer_name)
            ]

    @contextmanager
    def lock_slot(self, room_id: Optional[str], date: Optional[str]):
        from .models import BookingSlotLock

        key = (room_id or "", date or "")
        with self._slot_locks.hold(key):
            with store_errors("booking admission"):
                with transaction.atomic():
                    lock, _ = BookingSlotLock.objects.get_or_create(room_id=key[0], date=key[1])
                    lock_queryset_if_possible(BookingSlotLock.objects.filter(pk=lock.pk)).get()
                    yield

    @staticmethod
    def _to_domain(record) -> Booking:
        return Booking(
            id=record.booking_id,
            room_id=record.room_id,
            date=record.date,
            slot=TimeSlot(record.start, record.end),
            customer_name=record.customer_name,
            status=record.status,
            attributes=dict(record.attributes),
            created_at=record.created_at,
        )


class InMemoryBookingRepository(BookingRepository):

    def __init__(self):
        self._bookings: List[Booking] = []
        self._guard = threading.Lock()
        self._slot_locks = KeyedLock()

    def add(self, booking: Booking) -> str:
        with self._guard:
            self._bookings.append(booking)
        return str(booking.id)

    def list(self) -> List[Booking]:
        with self._guard:
            return list(self._bookings)

    def find_by_room_id(self, room_id: Optional[str]) -> List[Booking]:
        if room_id is None:
            return []
        return [booking for booking in self.list() if booking.room_id == room_id]

    def find_by_room_and_date(self, room_id: Optional[str], date: Optional[str]) -> List[Booking]:
        return [
            booking for booking in self.list()
            if booking.room_id == room_id and booking.date == date
        ]

    def find_by_customer(self, customer_name: Optional[str]) -> List[Booking]:
        if customer_name is None:
            return []
        return [booking for booking in self.list() if booking.customer_name == customer_name]

    @contextmanager
    def lock_slot(self, room_id: Optional[str], date: Optional[str]):
        with self._slot_locks.hold((room_id, date)):
            yield
