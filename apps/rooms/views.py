"""Room registry API views."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from config.container import get_room_registry
from shared.domain.exceptions import StoreUnavailable
from shared.infrastructure.http import error_response

from .serializers import RoomSerializer


class RoomListCreateView(APIView):
    """Register rooms and list them, optionally filtered by roomId."""

    serializer_class = RoomSerializer

    @extend_schema(
        parameters=[OpenApiParameter("roomId", str, description="Only rooms with this roomId.")],
        responses=RoomSerializer(many=True),
    )
    def get(self, request):  # type: ignore
        registry = get_room_registry()
        room_id = request.query_params.get("roomId")
        try:
            if room_id is None:
                rooms = registry.list_rooms()
            else:
                rooms = registry.find_rooms_by_room_id(room_id)
        except StoreUnavailable:
            return error_response("Failed to fetch rooms", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(RoomSerializer(rooms, many=True).data)

    @extend_schema(request=RoomSerializer, responses={201: RoomSerializer})
    def post(self, request):  # type: ignore
        serializer = RoomSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            room = get_room_registry().create_room(serializer.validated_data)
        except StoreUnavailable:
            return error_response("Failed to create room", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(RoomSerializer(room).data, status=status.HTTP_201_CREATED)
