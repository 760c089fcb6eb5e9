"""Bookings app package.

This app encapsulates the booking ledger: admission of new bookings with
overlap detection, and the reports that join bookings to rooms. Admission
holds a (roomId, date) lock across the overlap check and the insert, in
process and, on backends that support it, through a locked database row.
"""
