"""Response helpers shared by the API views."""

from __future__ import annotations

from rest_framework.response import Response  # type: ignore


def error_response(message: str, status_code: int, **extra) -> Response:
    """Error body used by every endpoint: ``{"error": message, ...}``."""
    body = {"error": message}
    body.update(extra)
    return Response(body, status=status_code)
