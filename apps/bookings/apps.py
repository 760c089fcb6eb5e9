from django.apps import AppConfig
from django.conf import settings


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"

    def ready(self) -> None:
        # The store context must exist before the first request is served.
        from config.container import build_store

        self.store = build_store(settings.BOOKING_STORE_BACKEND)
