"""Test settings for the Hall Booking service.

Uses a file-backed SQLite test database so that threaded tests share one
database, plain static file storage, and lets application log records
propagate so tests can assert on them.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',  # noqa: F405
        'TEST': {'NAME': str(BASE_DIR / 'test_db.sqlite3')},  # noqa: F405
    }
}

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.InMemoryStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

BOOKING_STORE_BACKEND = 'django'
BOOKING_STRICT_VALIDATION = False
BOOKING_REQUIRE_KNOWN_ROOM = False

LOGGING['loggers']['apps']['propagate'] = True  # noqa: F405
LOGGING['loggers']['shared']['propagate'] = True  # noqa: F405
