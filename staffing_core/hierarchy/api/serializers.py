# staffing_core/hierarchy/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class ToggleActiveResultSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    is_active = serializers.BooleanField()
    cascade_affected_counts = serializers.DictField(child=serializers.IntegerField(), required=False)


class BlockerSerializer(serializers.Serializer):
    type = serializers.CharField()
    count = serializers.IntegerField()


class DeletionCheckSerializer(serializers.Serializer):
    can_delete = serializers.BooleanField()
    blockers = BlockerSerializer(many=True)
