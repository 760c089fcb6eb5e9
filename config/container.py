"""Store context and service construction.

The store context (one room repository, one booking repository) is built
once by ``BookingsConfig.ready()`` and kept on the app config. Services get
it passed in at construction; nothing below reaches for a module-level
connection.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.apps import apps  # type: ignore
from django.conf import settings  # type: ignore
from django.core.exceptions import ImproperlyConfigured  # type: ignore

from apps.bookings.repositories import (
    BookingRepository,
    DjangoBookingRepository,
    InMemoryBookingRepository,
)
from apps.bookings.services import BookingLedger
from apps.rooms.repositories import DjangoRoomRepository, InMemoryRoomRepository, RoomRepository
from apps.rooms.services import RoomRegistry

STORE_BACKENDS = {
    "django": (DjangoRoomRepository, DjangoBookingRepository),
    "memory": (InMemoryRoomRepository, InMemoryBookingRepository),
}


@dataclass(frozen=True)
class StoreContext:
    rooms: RoomRepository
    bookings: BookingRepository


def build_store(backend: str) -> StoreContext:
    try:
        room_repo_class, booking_repo_class = STORE_BACKENDS[backend]
    except KeyError:
        raise ImproperlyConfigured(
            f"Unknown BOOKING_STORE_BACKEND {backend!r}; expected one of {sorted(STORE_BACKENDS)}"
        )
    return StoreContext(rooms=room_repo_class(), bookings=booking_repo_class())


def get_store() -> StoreContext:
    store = getattr(apps.get_app_config("bookings"), "store", None)
    if store is None:
        raise ImproperlyConfigured("Store context requested before the bookings app was ready.")
    return store


def get_room_registry() -> RoomRegistry:
    return RoomRegistry(get_store().rooms)


def get_booking_ledger() -> BookingLedger:
    store = get_store()
    return BookingLedger(
        store.bookings,
        RoomRegistry(store.rooms),
        strict_validation=settings.BOOKING_STRICT_VALIDATION,
        require_known_room=settings.BOOKING_REQUIRE_KNOWN_ROOM,
    )
