"""Booking ledger models."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A confirmed reservation of a room for a time slot on a date."""

    booking_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    room_id = models.TextField(
        null=True,
        blank=True,
        help_text=_("roomId of the booked room. Not a foreign key."),
    )
    date = models.TextField(null=True, blank=True)
    start = models.JSONField(null=True, blank=True, help_text=_("Opaque orderable time value."))
    end = models.JSONField(null=True, blank=True, help_text=_("Opaque orderable time value."))
    customer_name = models.TextField(null=True, blank=True)
    status = models.TextField(null=True, blank=True)
    attributes = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("Any other fields supplied with the booking request."),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["room_id", "date"], name="bookings_bo_room_id_5c1a2e_idx"),
            models.Index(fields=["customer_name"], name="bookings_bo_custome_8d7f3b_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.booking_id} for {self.room_id} on {self.date}"


class BookingSlotLock(models.Model):
    """
    One row per (room_id, date) that has seen an admission.

    Admission locks this row with SELECT ... FOR UPDATE so that concurrent
    workers serialise their overlap check and insert for the same room/date.
    """

    room_id = models.TextField()
    date = models.TextField()

    class Meta:
        verbose_name = _("Booking slot lock")
        verbose_name_plural = _("Booking slot locks")
        constraints = [
            models.UniqueConstraint(fields=["room_id", "date"], name="booking_slot_lock_unique"),
        ]

    def __str__(self) -> str:
        return f"{self.room_id}/{self.date}"
