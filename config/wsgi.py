"""WSGI config for the Hall Booking service.

Entry point for runserver and for threaded WSGI servers (e.g. gunicorn with
``--threads``). The store context is built during ``django.setup()``, before
the first request is accepted.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
