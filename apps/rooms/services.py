"""Room registry: create and look up rooms."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from .domain.entities import Room, opaque_key
from .repositories import RoomRepository

logger = logging.getLogger(__name__)


class RoomRegistry:
    """
    Stores room identities.

    No uniqueness or presence check is made on ``roomId`` or ``name``: the
    caller's attributes are stored as given.
    """

    def __init__(self, rooms: RoomRepository):
        self._rooms = rooms

    def create_room(self, attributes: Mapping[str, Any]) -> Room:
        room = Room(attributes=dict(attributes))
        self._rooms.add(room)
        logger.info("Room created: record=%s roomId=%s", room.id, room.room_id)
        return room

    def list_rooms(self) -> List[Room]:
        return self._rooms.list()

    def find_rooms_by_room_id(self, room_id) -> List[Room]:
        return self._rooms.find_by_room_id(opaque_key(room_id))
