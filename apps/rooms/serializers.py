"""Serializers for the room registry."""

from __future__ import annotations

from collections.abc import Mapping

from rest_framework import serializers  # type: ignore


class RoomSerializer(serializers.Serializer):
    """
    Accepts any JSON object as a room.

    ``roomId`` and ``name`` are optional but, when present, must be strings
    or numbers. Every other key is kept as-is.
    """

    roomId = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)

    def to_internal_value(self, data):  # type: ignore
        if not isinstance(data, Mapping):
            raise serializers.ValidationError({"non_field_errors": ["Expected a JSON object."]})
        cleaned = super().to_internal_value(data)
        attributes = dict(data)
        attributes.update(cleaned)
        return attributes

    def to_representation(self, room):  # type: ignore
        representation = {"recordId": room.id}
        representation.update(room.attributes)
        return representation
