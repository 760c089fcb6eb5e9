"""URL configuration for the Hall Booking service.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the API schema and the application-level URL modules.
"""
from django.contrib import admin  # type: ignore
from django.http import HttpResponse  # type: ignore
from django.urls import include, path  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore


def welcome(request):
    return HttpResponse('Welcome to Hall Booking App', content_type='text/plain')


# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('', welcome, name='welcome'),
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('api/v1/', include('apps.bookings.urls')),
    path('api/v1/', include('apps.rooms.urls')),
]
