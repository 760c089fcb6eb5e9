"""Integration tests for booking API endpoints."""

from __future__ import annotations

from unittest import mock

from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.repositories import DjangoBookingRepository
from shared.domain.exceptions import StoreUnavailable


class BookingAPITests(APITestCase):
    """Covers creation, overlap conflicts and store failures."""

    def setUp(self) -> None:
        self.list_url = reverse("booking-create")
        self.client.post(reverse("room-list"), {"roomId": "R1", "name": "Hall A"}, format="json")

    def _payload(self, start="09:00", end="10:00", customer="Alice", **extra) -> dict:
        payload = {
            "roomId": "R1",
            "date": "2024-01-01",
            "start": start,
            "end": end,
            "customerName": customer,
        }
        payload.update(extra)
        return payload

    def test_create_booking(self) -> None:
        response = self.client.post(self.list_url, self._payload(status="confirmed"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["roomId"], "R1")
        self.assertEqual(response.data["customerName"], "Alice")
        self.assertEqual(response.data["status"], "confirmed")
        booking = Booking.objects.get()
        self.assertEqual(str(booking.booking_id), response.data["bookingId"])
        self.assertEqual((booking.start, booking.end), ("09:00", "10:00"))

    def test_prevent_double_booking_on_overlap(self) -> None:
        first = self.client.post(self.list_url, self._payload(), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)

        conflict = self.client.post(self.list_url, self._payload("10:00", "11:00", "Bob"), format="json")

        self.assertEqual(conflict.status_code, status.HTTP_400_BAD_REQUEST, conflict.data)
        self.assertEqual(conflict.data["error"], "Room already booked for the given date and time")
        self.assertEqual(conflict.data["conflicts"], [first.data["bookingId"]])
        self.assertEqual(Booking.objects.count(), 1)

    def test_adjacent_minute_is_free(self) -> None:
        self.client.post(self.list_url, self._payload(), format="json")

        response = self.client.post(self.list_url, self._payload("10:01", "11:00", "Bob"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_numeric_times_are_kept_as_numbers(self) -> None:
        response = self.client.post(self.list_url, self._payload(start=9, end=10.5), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual((response.data["start"], response.data["end"]), (9, 10.5))

    def test_missing_fields_are_accepted_by_default(self) -> None:
        response = self.client.post(self.list_url, {"customerName": "Alice"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIsNone(response.data["roomId"])

    def test_extra_keys_are_stored(self) -> None:
        self.client.post(self.list_url, self._payload(purpose="standup"), format="json")

        self.assertEqual(Booking.objects.get().attributes, {"purpose": "standup"})

    def test_rejects_non_object_body(self) -> None:
        response = self.client.post(self.list_url, [self._payload()], format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Booking.objects.count(), 0)

    def test_rejects_object_as_time(self) -> None:
        response = self.client.post(self.list_url, self._payload(start={"h": 9}), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("start", response.data)

    @override_settings(BOOKING_STRICT_VALIDATION=True)
    def test_strict_validation_reports_wire_names(self) -> None:
        response = self.client.post(self.list_url, {"roomId": "R1", "start": "10:00", "end": "09:00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(set(response.data["fields"]), {"date", "customerName", "end"})
        self.assertEqual(response.data["fields"]["end"], "End must come after start.")

    @override_settings(BOOKING_REQUIRE_KNOWN_ROOM=True)
    def test_unknown_room_is_rejected_when_required(self) -> None:
        response = self.client.post(self.list_url, self._payload(roomId="ghost"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(set(response.data["fields"]), {"roomId"})

    def test_padded_strings_are_kept(self) -> None:
        self.client.post(reverse("room-list"), {"roomId": "R1 ", "name": " Hall A"}, format="json")

        response = self.client.post(self.list_url, self._payload(customer="Alice ", roomId="R1 "), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual((response.data["roomId"], response.data["customerName"]), ("R1 ", "Alice "))
        padded = self.client.get(reverse("customer-history", args=["Alice "]))
        self.assertEqual([row["roomName"] for row in padded.data], ["R1 "])
        self.assertEqual(self.client.get(reverse("customer-history", args=["Alice"])).data, [])
        rows = self.client.get(reverse("room-bookings")).data
        self.assertEqual([row["roomName"] for row in rows], [" Hall A"])

    def test_paths_without_trailing_slash(self) -> None:
        created = self.client.post("/api/v1/bookings", self._payload(), format="json")

        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)
        self.assertEqual(len(self.client.get("/api/v1/customers/Alice").data), 1)
        self.assertEqual(len(self.client.get("/api/v1/customers/bookings").data), 1)
        self.assertEqual(len(self.client.get("/api/v1/rooms/bookings").data), 1)

    def test_store_failure_returns_500(self) -> None:
        with mock.patch.object(DjangoBookingRepository, "add", side_effect=StoreUnavailable("booking insert")):
            response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "Failed to book room"})


class BookingReportAPITests(APITestCase):
    """Covers the room and customer reports."""

    def setUp(self) -> None:
        rooms_url = reverse("room-list")
        self.client.post(rooms_url, {"roomId": "R1", "name": "Hall A"}, format="json")
        self.client.post(rooms_url, {"roomId": "R2", "name": "Hall B"}, format="json")
        bookings_url = reverse("booking-create")
        self.alice = self.client.post(
            bookings_url,
            {"roomId": "R1", "date": "2024-01-01", "start": "09:00", "end": "10:00",
             "customerName": "Alice", "status": "paid"},
            format="json",
        ).data
        self.client.post(
            bookings_url,
            {"roomId": "ghost", "date": "2024-01-01", "start": "09:00", "end": "10:00", "customerName": "Bob"},
            format="json",
        )

    def test_room_bookings(self) -> None:
        response = self.client.get(reverse("room-bookings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [{
            "roomName": "Hall A",
            "roomId": "R1",
            "bookedStatus": "paid",
            "customerName": "Alice",
            "date": "2024-01-01",
            "startTime": "09:00",
            "endTime": "10:00",
        }])

    def test_customer_bookings_skip_orphans(self) -> None:
        response = self.client.get(reverse("customer-bookings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [{
            "customerName": "Alice",
            "roomName": "Hall A",
            "date": "2024-01-01",
            "startTime": "09:00",
            "endTime": "10:00",
        }])

    def test_customer_history(self) -> None:
        response = self.client.get(reverse("customer-history", args=["Alice"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [{
            "customerName": "Alice",
            "roomName": "R1",
            "date": "2024-01-01",
            "startTime": "09:00",
            "endTime": "10:00",
            "bookingId": self.alice["bookingId"],
            "bookingDate": "2024-01-01",
            "bookingStatus": "paid",
        }])

    def test_customer_history_includes_orphans(self) -> None:
        response = self.client.get(reverse("customer-history", args=["Bob"]))

        self.assertEqual([row["roomName"] for row in response.data], ["ghost"])

    def test_unknown_customer_has_empty_history(self) -> None:
        response = self.client.get(reverse("customer-history", args=["Nobody"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_reports_return_500_when_store_fails(self) -> None:
        failing = mock.patch.object(
            DjangoBookingRepository, "list", side_effect=StoreUnavailable("booking list")
        )
        with failing, mock.patch.object(
            DjangoBookingRepository, "find_by_room_id", side_effect=StoreUnavailable("booking lookup by room")
        ), mock.patch.object(
            DjangoBookingRepository, "find_by_customer", side_effect=StoreUnavailable("booking lookup by customer")
        ):
            rooms = self.client.get(reverse("room-bookings"))
            customers = self.client.get(reverse("customer-bookings"))
            history = self.client.get(reverse("customer-history", args=["Alice"]))

        self.assertEqual(rooms.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(rooms.data, {"error": "Failed to fetch room bookings"})
        self.assertEqual(customers.data, {"error": "Failed to fetch customer bookings"})
        self.assertEqual(history.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class WelcomeTests(APITestCase):

    def test_root_returns_welcome_text(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.content, b"Welcome to Hall Booking App")
