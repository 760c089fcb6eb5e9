"""
Room record stores.

Two interchangeable backends implement ``RoomRepository``:
- DjangoRoomRepository: persists rooms through the ORM
- InMemoryRoomRepository: keeps rooms in process memory
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import uuid4
import threading

from shared.infrastructure.store import store_errors

from .domain.entities import Room, opaque_key


class RoomRepository(ABC):
    """Append-only room store."""

    @abstractmethod
    def add(self, room: Room) -> str:
        """Insert a room and return its record id."""

    @abstractmethod
    def list(self) -> List[Room]:
        """All rooms in store order."""

    @abstractmethod
    def find_by_room_id(self, room_id: Optional[str]) -> List[Room]:
        """Rooms whose roomId equals ``room_id``. ``None`` matches nothing."""


class DjangoRoomRepository(RoomRepository):

    def add(self, room: Room) -> str:
        from .models import Room as RoomModel

        with store_errors("room insert"):
            record = RoomModel.objects.create(
                room_id=room.room_id,
                name=opaque_key(room.name),
                attributes=room.attributes,
            )
        room.id = str(record.pk)
        room.created_at = record.created_at
        return room.id

    def list(self) -> List[Room]:
        from .models import Room as RoomModel

        with store_errors("room list"):
            return [self._to_domain(record) for record in RoomModel.objects.all()]

    def find_by_room_id(self, room_id: Optional[str]) -> List[Room]:
        from .models import Room as RoomModel

        if room_id is None:
            return []
        with store_errors("room lookup"):
            return [
                self._to_domain(record)
                for record in RoomModel.objects.filter(room_id=room_id)
            ]

    @staticmethod
    def _to_domain(record) -> Room:
        return Room(
            id=str(record.pk),
            attributes=dict(record.attributes),
            created_at=record.created_at,
        )


class InMemoryRoomRepository(RoomRepository):

    def __init__(self):
        self._rooms: List[Room] = []
        self._guard = threading.Lock()

    def add(self, room: Room) -> str:
        room.id = uuid4().hex
        with self._guard:
            self._rooms.append(room)
        return room.id

    def list(self) -> List[Room]:
        with self._guard:
            return list(self._rooms)

    def find_by_room_id(self, room_id: Optional[str]) -> List[Room]:
        if room_id is None:
            return []
        with self._guard:
            return [room for room in self._rooms if room.room_id == room_id]
