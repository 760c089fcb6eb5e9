"""Room registry models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A bookable room. The registry is append-only."""

    room_id = models.TextField(
        null=True,
        blank=True,
        db_index=True,
        help_text=_("Caller-supplied room identifier. Not unique."),
    )
    name = models.TextField(null=True, blank=True)
    attributes = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("All attributes supplied on creation, verbatim."),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name or '-'} ({self.room_id or 'no roomId'})"
