"""Development settings for the Hall Booking service.

This module extends the base settings with development specific
configuration, such as enabling debug and allowing all hosts. Do not use
these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Browsable API is handy while developing
REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ],
}

LOG_LEVEL = 'DEBUG'
LOGGING['loggers']['apps']['level'] = LOG_LEVEL  # noqa: F405
LOGGING['loggers']['shared']['level'] = LOG_LEVEL  # noqa: F405
