"""Integration tests for room registry API endpoints."""

from __future__ import annotations

from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rooms.models import Room
from apps.rooms.repositories import DjangoRoomRepository
from shared.domain.exceptions import StoreUnavailable


class RoomAPITests(APITestCase):
    """Covers registering and listing rooms."""

    def setUp(self) -> None:
        self.list_url = reverse("room-list")

    def test_create_room(self) -> None:
        response = self.client.post(self.list_url, {"roomId": "R1", "name": "Hall A", "seats": 40}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        room = Room.objects.get()
        self.assertEqual(response.data, {"recordId": str(room.pk), "roomId": "R1", "name": "Hall A", "seats": 40})
        self.assertEqual(room.room_id, "R1")

    def test_room_without_fields_is_accepted(self) -> None:
        response = self.client.post(self.list_url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(set(response.data), {"recordId"})

    def test_rejects_non_object_body(self) -> None:
        response = self.client.post(self.list_url, ["R1"], format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Room.objects.count(), 0)

    def test_list_and_filter_rooms(self) -> None:
        self.client.post(self.list_url, {"roomId": "R1", "name": "Hall A"}, format="json")
        self.client.post(self.list_url, {"roomId": "R2", "name": "Hall B"}, format="json")

        everything = self.client.get(self.list_url)
        filtered = self.client.get(self.list_url, {"roomId": "R2"})

        self.assertEqual(everything.status_code, status.HTTP_200_OK)
        self.assertEqual([room["roomId"] for room in everything.data], ["R1", "R2"])
        self.assertEqual([room["name"] for room in filtered.data], ["Hall B"])

    def test_store_failure_returns_500(self) -> None:
        with mock.patch.object(DjangoRoomRepository, "add", side_effect=StoreUnavailable("room insert")):
            created = self.client.post(self.list_url, {"roomId": "R1"}, format="json")
        with mock.patch.object(DjangoRoomRepository, "list", side_effect=StoreUnavailable("room list")):
            listed = self.client.get(self.list_url)

        self.assertEqual(created.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(created.data, {"error": "Failed to create room"})
        self.assertEqual(listed.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(listed.data, {"error": "Failed to fetch rooms"})

    def test_attributes_are_stored_verbatim(self) -> None:
        long_name = "Hall " * 100
        payload = {"roomId": "R1 ", "name": " Hall A", "note": long_name}

        padded = self.client.post(self.list_url, payload, format="json")
        long = self.client.post(self.list_url, {"roomId": "R2", "name": long_name}, format="json")

        self.assertEqual(padded.status_code, status.HTTP_201_CREATED, padded.data)
        self.assertEqual(long.status_code, status.HTTP_201_CREATED, long.data)
        self.assertEqual(Room.objects.get(pk=padded.data["recordId"]).attributes, payload)
        self.assertEqual(Room.objects.get(pk=long.data["recordId"]).name, long_name)
        self.assertEqual(len(self.client.get(self.list_url, {"roomId": "R1 "}).data), 1)
        self.assertEqual(self.client.get(self.list_url, {"roomId": "R1"}).data, [])

    def test_path_without_trailing_slash(self) -> None:
        created = self.client.post("/api/v1/rooms", {"roomId": "R1"}, format="json")
        listed = self.client.get("/api/v1/rooms")

        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)
        self.assertEqual([room["roomId"] for room in listed.data], ["R1"])
