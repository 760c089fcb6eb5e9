"""ASGI config for the Hall Booking service.

This module exposes the ASGI application for async-capable servers such as
uvicorn or daphne. Each request is handled concurrently; booking admission
serialises itself per (roomId, date) and needs no server-side ordering.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
