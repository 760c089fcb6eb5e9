"""URL routing for the booking ledger."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCreateView, CustomerBookingsView, CustomerHistoryView, RoomBookingsView

urlpatterns = [
    path("bookings/", BookingCreateView.as_view(), name="booking-create"),
    path("rooms/bookings/", RoomBookingsView.as_view(), name="room-bookings"),
    # Must precede the customer history route: "bookings" is not a customer name here.
    path("customers/bookings/", CustomerBookingsView.as_view(), name="customer-bookings"),
    path("customers/<str:name>/", CustomerHistoryView.as_view(), name="customer-history"),
]

# Same routes without the trailing slash; APPEND_SLASH cannot redirect a POST.
urlpatterns += [
    path("bookings", BookingCreateView.as_view()),
    path("rooms/bookings", RoomBookingsView.as_view()),
    path("customers/bookings", CustomerBookingsView.as_view()),
    path("customers/<str:name>", CustomerHistoryView.as_view()),
]
