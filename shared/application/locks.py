"""
Keyed mutual exclusion for booking admission.

Admission is a check-then-insert sequence. Two requests for the same
``(room_id, date)`` must not interleave between the overlap query and the
insert, while requests for other rooms or dates proceed in parallel.
"""

from contextlib import contextmanager
from typing import Dict, Hashable
import threading


class _Entry:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class KeyedLock:
    """
    A registry of locks, one per key, created on demand

    Entries are reference counted and dropped once no thread holds or waits
    for them, so the registry does not grow with every room/date ever booked.

    Usage:
        locks = KeyedLock()
        with locks.hold(("R1", "2024-01-01")):
            ...  # query and insert
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._entries: Dict[Hashable, _Entry] = {}

    @contextmanager
    def hold(self, key: Hashable):
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.holders += 1

        entry.lock.acquire()
        try:
            yield
        finally:
            entry.lock.release()
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._entries[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)
