"""Serializers for the booking ledger."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real

from rest_framework import serializers  # type: ignore

from .services import BookRoomCommand

# Wire name -> BookRoomCommand attribute
BOOKING_FIELDS = {
    "roomId": "room_id",
    "date": "date",
    "start": "start",
    "end": "end",
    "customerName": "customer_name",
    "status": "status",
}


class TimeValueField(serializers.JSONField):
    """A time-of-day value: an "HH:MM"-style string or a number."""

    def to_internal_value(self, data):  # type: ignore
        if data is not None and (isinstance(data, bool) or not isinstance(data, (str, Real))):
            raise serializers.ValidationError("Must be a string or a number.")
        return data


class BookingCreateSerializer(serializers.Serializer):
    """
    Booking request.

    No field is required here; presence checks are the ledger's job and are
    switched off by default. Unknown keys are kept with the booking.
    """

    roomId = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    date = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    start = TimeValueField(required=False, allow_null=True)
    end = TimeValueField(required=False, allow_null=True)
    customerName = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    status = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)

    def to_internal_value(self, data):  # type: ignore
        if not isinstance(data, Mapping):
            raise serializers.ValidationError({"non_field_errors": ["Expected a JSON object."]})
        cleaned = super().to_internal_value(data)
        extra = {key: value for key, value in data.items() if key not in BOOKING_FIELDS}
        command = BookRoomCommand(
            room_id=cleaned.get("roomId"),
            date=cleaned.get("date"),
            start=cleaned.get("start"),
            end=cleaned.get("end"),
            customer_name=cleaned.get("customerName"),
            status=cleaned.get("status"),
            attributes=extra,
        )
        return command


class BookingSerializer(serializers.Serializer):
    """Representation of a stored booking."""

    bookingId = serializers.ReadOnlyField(source="id")
    roomId = serializers.ReadOnlyField(source="room_id")
    customerName = serializers.ReadOnlyField(source="customer_name")
    date = serializers.ReadOnlyField()
    start = serializers.ReadOnlyField()
    end = serializers.ReadOnlyField()
    status = serializers.ReadOnlyField()

    def to_representation(self, booking):  # type: ignore
        representation = super().to_representation(booking)
        representation["bookingId"] = str(booking.id)
        return representation


class RoomBookingSerializer(serializers.Serializer):
    roomName = serializers.ReadOnlyField(source="room_name")
    roomId = serializers.ReadOnlyField(source="room_id")
    bookedStatus = serializers.ReadOnlyField(source="booked_status")
    customerName = serializers.ReadOnlyField(source="customer_name")
    date = serializers.ReadOnlyField()
    startTime = serializers.ReadOnlyField(source="start_time")
    endTime = serializers.ReadOnlyField(source="end_time")


class CustomerBookingSerializer(serializers.Serializer):
    customerName = serializers.ReadOnlyField(source="customer_name")
    roomName = serializers.ReadOnlyField(source="room_name")
    date = serializers.ReadOnlyField()
    startTime = serializers.ReadOnlyField(source="start_time")
    endTime = serializers.ReadOnlyField(source="end_time")


class CustomerHistorySerializer(serializers.Serializer):
    """``roomName`` carries the roomId and ``bookingDate`` repeats ``date``."""

    customerName = serializers.ReadOnlyField(source="customer_name")
    roomName = serializers.ReadOnlyField(source="room_name")
    date = serializers.ReadOnlyField()
    startTime = serializers.ReadOnlyField(source="start_time")
    endTime = serializers.ReadOnlyField(source="end_time")
    bookingId = serializers.ReadOnlyField(source="booking_id")
    bookingDate = serializers.ReadOnlyField(source="booking_date")
    bookingStatus = serializers.ReadOnlyField(source="booking_status")
