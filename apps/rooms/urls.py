"""URL routing for the room registry."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import RoomListCreateView

urlpatterns = [
    path("rooms/", RoomListCreateView.as_view(), name="room-list"),
    # APPEND_SLASH cannot redirect a POST, so the bare path is routed too.
    path("rooms", RoomListCreateView.as_view()),
]
