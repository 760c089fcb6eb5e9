"""Rooms app package.

The room registry: an append-only store of rooms keyed by an internal
record id. The caller-supplied ``roomId`` is a plain attribute used for
lookups by value and as the join key for the booking ledger.
"""
