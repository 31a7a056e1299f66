# staffing_core/health_systems/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.health_systems.models import HealthSystem


class HealthSystemSerializer(serializers.ModelSerializer):
    class Meta:
        model = HealthSystem
        fields = [
            "id",
            "name",
            "slug",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class HealthSystemCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class HealthSystemCreatedSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    job_types_created = serializers.IntegerField()


class HealthSystemUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
