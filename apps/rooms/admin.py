"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "room_id", "name", "created_at")
    search_fields = ("room_id", "name")
    readonly_fields = ("room_id", "name", "attributes", "created_at")
