"""
Common Value Objects

- TimeSlot: a time-of-day interval on a single calendar date
"""

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Union

from shared.domain.base import ValueObject

# Time-of-day values are opaque: "HH:MM" strings compared lexicographically
# or numbers such as minutes since midnight.
TimeValue = Union[str, int, float]


def _comparable(left, right) -> bool:
    """Only strings with strings and numbers with numbers are ordered."""
    if isinstance(left, str) and isinstance(right, str):
        return True
    return (
        isinstance(left, Real) and not isinstance(left, bool)
        and isinstance(right, Real) and not isinstance(right, bool)
    )


def _le(left, right) -> bool:
    return _comparable(left, right) and left <= right


def _within(low, value, high) -> bool:
    return _le(low, value) and _le(value, high)


@dataclass(frozen=True)
class TimeSlot(ValueObject):
    """
    Time slot value object

    Represents an interval from ``start`` to ``end`` on one date. Both bounds
    are treated as inclusive when checking for overlaps, so slots that merely
    touch (one ends at 10:00, the next starts at 10:00) DO overlap.

    A slot with a missing bound or with bounds of different types is still a
    valid value; it simply never satisfies an ordering comparison.
    """
    start: Optional[TimeValue]
    end: Optional[TimeValue]

    def overlaps_with(self, existing: 'TimeSlot') -> bool:
        """
        Check if this (candidate) slot conflicts with an existing slot

        The slots overlap if any of the following holds:
        1. the candidate start falls inside the existing slot
        2. the candidate end falls inside the existing slot
        3. the candidate fully contains the existing slot

        Examples:
            - TimeSlot("09:00", "10:00") vs TimeSlot("09:30", "11:00") -> True
            - TimeSlot("10:00", "11:00") vs TimeSlot("09:00", "10:00") -> True (touching)
            - TimeSlot("10:01", "11:00") vs TimeSlot("09:00", "10:00") -> False
        """
        if not isinstance(existing, TimeSlot):
            raise TypeError("Can only check overlap with another TimeSlot")

        return (
            _within(existing.start, self.start, existing.end)
            or _within(existing.start, self.end, existing.end)
            or (_le(self.start, existing.start) and _le(existing.end, self.end))
        )

    @property
    def is_complete(self) -> bool:
        """Both bounds are present."""
        return self.start is not None and self.end is not None

    @property
    def is_ordered(self) -> bool:
        """Start comes strictly before end."""
        return _comparable(self.start, self.end) and self.start < self.end

    def __str__(self):
        return f"{self.start}-{self.end}"

    def __repr__(self):
        return f"TimeSlot({self.start!r}, {self.end!r})"
