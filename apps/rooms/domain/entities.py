"""
Room Domain Entities

- Room: a bookable room as registered by a caller
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from shared.domain.base import Entity


def opaque_key(value) -> Optional[str]:
    """Normalise a caller-supplied identifier for equality lookups."""
    if value is None:
        return None
    return str(value)


@dataclass(eq=False)
class Room(Entity):
    """
    Room entity

    A room keeps every attribute the caller supplied, verbatim. ``roomId``
    and ``name`` are read from those attributes; neither is required nor
    unique. A room without ``roomId`` can never be matched by a lookup.

    ``id`` is the record identifier assigned by the store on insert.
    """

    attributes: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def room_id(self) -> Optional[str]:
        return opaque_key(self.attributes.get("roomId"))

    @property
    def name(self):
        return self.attributes.get("name")

    def __str__(self):
        return f"Room({self.room_id}, {self.name})"
