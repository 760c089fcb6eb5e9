"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, BookingSlotLock


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_id",
        "room_id",
        "date",
        "start",
        "end",
        "customer_name",
        "status",
        "created_at",
    )
    list_filter = ("date", "status")
    search_fields = ("booking_id", "room_id", "customer_name")
    readonly_fields = (
        "booking_id",
        "room_id",
        "date",
        "start",
        "end",
        "customer_name",
        "status",
        "attributes",
        "created_at",
    )


@admin.register(BookingSlotLock)
class BookingSlotLockAdmin(admin.ModelAdmin):
    list_display = ("room_id", "date")
    search_fields = ("room_id",)
