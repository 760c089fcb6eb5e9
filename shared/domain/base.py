"""
Base Domain Classes

This module provides the building blocks used by both components:
- Entity: Objects with unique identity
- ValueObject: Immutable objects compared by value
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(eq=False)
class Entity(ABC):
    """
    Base class for all entities

    Entities have unique identity. Two entities are equal if their IDs are
    equal. Subclasses declare the ``id`` field themselves because each store
    assigns identifiers differently.
    """

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
