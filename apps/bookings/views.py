"""API views for the booking ledger."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from config.container import get_booking_ledger
from shared.domain.exceptions import SlotConflict, StoreUnavailable, ValidationGap
from shared.infrastructure.http import error_response

from .serializers import (
    BOOKING_FIELDS,
    BookingCreateSerializer,
    BookingSerializer,
    CustomerBookingSerializer,
    CustomerHistorySerializer,
    RoomBookingSerializer,
)

WIRE_NAMES = {attribute: wire for wire, attribute in BOOKING_FIELDS.items()}


class BookingCreateView(APIView):
    """Book a room for a time slot on a date."""

    serializer_class = BookingCreateSerializer

    @extend_schema(request=BookingCreateSerializer, responses={201: BookingSerializer})
    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = get_booking_ledger().book_room(serializer.validated_data)
        except SlotConflict as exc:
            return error_response(
                str(exc),
                status.HTTP_400_BAD_REQUEST,
                conflicts=exc.conflicting_ids,
            )
        except ValidationGap as exc:
            fields = {WIRE_NAMES.get(name, name): message for name, message in exc.errors.items()}
            return error_response("Invalid booking request", status.HTTP_400_BAD_REQUEST, fields=fields)
        except StoreUnavailable:
            return error_response("Failed to book room", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class RoomBookingsView(APIView):
    """Every room with its bookings, one row per booking."""

    @extend_schema(responses=RoomBookingSerializer(many=True))
    def get(self, request):  # type: ignore
        try:
            rows = get_booking_ledger().list_room_bookings()
        except StoreUnavailable:
            return error_response("Failed to fetch room bookings", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(RoomBookingSerializer(rows, many=True).data)


class CustomerBookingsView(APIView):
    """Every booking with the name of its room."""

    @extend_schema(responses=CustomerBookingSerializer(many=True))
    def get(self, request):  # type: ignore
        try:
            rows = get_booking_ledger().list_customer_bookings()
        except StoreUnavailable:
            return error_response("Failed to fetch customer bookings", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(CustomerBookingSerializer(rows, many=True).data)


class CustomerHistoryView(APIView):
    """All bookings made under one customer name (exact match)."""

    @extend_schema(responses=CustomerHistorySerializer(many=True))
    def get(self, request, name):  # type: ignore
        try:
            rows = get_booking_ledger().get_customer_history(name)
        except StoreUnavailable:
            return error_response("Failed to fetch customer bookings", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(CustomerHistorySerializer(rows, many=True).data)
