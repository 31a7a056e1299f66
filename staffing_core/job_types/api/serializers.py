# staffing_core/job_types/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.job_types.models import JobType


class JobTypeSerializer(serializers.ModelSerializer):
    health_system_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = JobType
        fields = [
            "id",
            "health_system_id",
            "code",
            "name",
            "description",
            "is_default",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class JobTypeCreateSerializer(serializers.Serializer):
    health_system_id = serializers.UUIDField()
    code = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")


class JobTypeUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
