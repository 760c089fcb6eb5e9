import pytest

from apps.bookings.repositories import InMemoryBookingRepository
from apps.bookings.services import BookingLedger, BookRoomCommand
from apps.rooms.repositories import InMemoryRoomRepository
from apps.rooms.services import RoomRegistry


@pytest.fixture
def registry():
    return RoomRegistry(InMemoryRoomRepository())


@pytest.fixture
def bookings():
    return InMemoryBookingRepository()


@pytest.fixture
def ledger(bookings, registry):
    return BookingLedger(bookings, registry)


@pytest.fixture
def command():
    def make(room_id="R1", date="2024-01-01", start="09:00", end="10:00", customer_name="Alice", **kwargs):
        return BookRoomCommand(
            room_id=room_id,
            date=date,
            start=start,
            end=end,
            customer_name=customer_name,
            **kwargs,
        )

    return make
